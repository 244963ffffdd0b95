"""Room graph value types.

A maze is a small undirected graph: rooms are vertices, connections are
edges. Once built a ``RoomGraph`` is never mutated; the builder assembles
plain neighbor sets and freezes them here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple


class RoomKind(Enum):
    """Role tag of a room. Values are the tags written to room files."""

    START = "START_ROOM"
    END = "END_ROOM"
    MID = "MID_ROOM"


@dataclass(frozen=True)
class Room:
    """A single vertex of the maze."""

    id: int
    name: str
    kind: RoomKind = RoomKind.MID
    neighbors: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def degree(self) -> int:
        return len(self.neighbors)


@dataclass(frozen=True)
class RoomGraph:
    """All rooms of one maze plus the START/END indices.

    Rooms are stored in id order, so ``rooms[i].id == i``.
    """

    rooms: Tuple[Room, ...]
    start_id: int
    end_id: int
    _by_name: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # frozen dataclass: cache the name index via object.__setattr__
        object.__setattr__(self, "_by_name", {room.name: room.id for room in self.rooms})

    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self.rooms)

    @property
    def start(self) -> Room:
        return self.rooms[self.start_id]

    @property
    def end(self) -> Room:
        return self.rooms[self.end_id]

    def room(self, room_id: int) -> Room:
        return self.rooms[room_id]

    def room_by_name(self, name: str) -> Optional[Room]:
        """Exact (case-sensitive) lookup by room name."""
        room_id = self._by_name.get(name)
        return None if room_id is None else self.rooms[room_id]

    def neighbors(self, room_id: int) -> List[int]:
        """Neighbor ids in ascending order."""
        return sorted(self.rooms[room_id].neighbors)

    def neighbor_names(self, room_id: int) -> List[str]:
        return [self.rooms[n].name for n in self.neighbors(room_id)]

    def degree(self, room_id: int) -> int:
        return self.rooms[room_id].degree

    def edges(self) -> List[Tuple[int, int]]:
        """Each undirected edge once, as (low_id, high_id) pairs."""
        return sorted(
            (room.id, other)
            for room in self.rooms
            for other in room.neighbors
            if room.id < other
        )
