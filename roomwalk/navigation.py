"""
Navigation engine: one traversal session from START to END.

States:
    AWAITING_INPUT  current room shown, waiting for the next destination
    WON             current room is END; the session is over

The engine reads the graph but never changes it. All mutable state lives in
``NavigationState``, which only the engine writes.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Sequence, Tuple

from .environment import Room, RoomGraph, validate_room_move


class NavigationPhase(Enum):
    AWAITING_INPUT = "awaiting_input"
    WON = "won"


class UnrecognizedRoomError(Exception):
    """Raised when the typed name is not a neighbor of the current room.

    Recoverable: the engine state is untouched and the caller can prompt again.
    """

    def __init__(self, room_name: str, options: Sequence[str]) -> None:
        self.room_name = room_name
        self.options = list(options)
        super().__init__(
            f"{room_name!r} is not connected to this room; choose one of: {', '.join(self.options)}"
        )


class SessionOverError(Exception):
    """Raised when a move is submitted after END was reached."""


class SessionNotWonError(Exception):
    """Raised when the summary is requested before END was reached."""


@dataclass
class NavigationState:
    """Mutable traversal state.

    Attributes:
        current_room_id: Room the player stands in
        step_history: Names of rooms entered after leaving START, in order
        phase: AWAITING_INPUT until END is reached, then WON
    """

    current_room_id: int
    step_history: List[str] = field(default_factory=list)
    phase: NavigationPhase = NavigationPhase.AWAITING_INPUT

    @property
    def step_count(self) -> int:
        return len(self.step_history)


class NavigationEngine:
    """Walks a player through a ``RoomGraph``."""

    def __init__(self, graph: RoomGraph) -> None:
        self.graph = graph
        self._state = NavigationState(current_room_id=graph.start_id)
        if graph.start_id == graph.end_id:
            self._state.phase = NavigationPhase.WON

    @property
    def state(self) -> NavigationState:
        """Snapshot of the traversal state (a copy; edits do not affect the engine)."""
        return replace(self._state, step_history=list(self._state.step_history))

    @property
    def current_room(self) -> Room:
        return self.graph.room(self._state.current_room_id)

    @property
    def is_won(self) -> bool:
        return self._state.phase is NavigationPhase.WON

    def describe_current_room(self) -> Tuple[str, List[str]]:
        """Return ``(room_name, neighbor_names)``, neighbors in ascending id order."""
        room_id = self._state.current_room_id
        return self.graph.room(room_id).name, self.graph.neighbor_names(room_id)

    def submit_choice(self, room_name: str) -> Room:
        """Move to the neighbor called ``room_name`` (exact, case-sensitive match).

        Returns:
            The room entered.

        Raises:
            UnrecognizedRoomError: No neighbor has that name; nothing changed.
            SessionOverError: The session already reached END.
        """
        if self.is_won:
            raise SessionOverError("The END room was already reached; start a new session")

        target = validate_room_move(self.graph, self._state.current_room_id, room_name)
        if target is None:
            raise UnrecognizedRoomError(
                room_name, self.graph.neighbor_names(self._state.current_room_id)
            )

        room = self.graph.room(target)
        self._state.current_room_id = target
        self._state.step_history.append(room.name)
        if target == self.graph.end_id:
            self._state.phase = NavigationPhase.WON
        return room

    def finalize(self) -> Tuple[int, List[str]]:
        """Return ``(step_count, step_history)`` for the victory summary.

        Raises:
            SessionNotWonError: END has not been reached yet.
        """
        if not self.is_won:
            raise SessionNotWonError(
                f"Still in {self.current_room.name!r}; the END room has not been reached"
            )
        return self._state.step_count, list(self._state.step_history)
