"""
GraphBuilder: random maze construction.

Builds the fixed-size room graph a session is played on:

1. Draw a unique name for every room (without replacement from the pool)
2. Pick START, then re-roll END until it differs from START
3. Wire random symmetric connections until every room has ``min_degree``
   neighbors
4. Tag room kinds and freeze the result into a ``RoomGraph``

Step 3 only looks at the deficit of the room currently being filled; adding
an edge may push the other endpoint over ``min_degree`` and nothing caps it.
Per-room degree alone does not guarantee a single connected component, so by
default the wiring is redone until every room is reachable from START.

Usage:
    graph = build_graph(DEFAULT_ROOM_NAMES, rng=random.Random(7))
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Set

from .environment import Room, RoomGraph, RoomKind, is_connected
from .logging_utils import log_deterministic, log_error

ROOM_COUNT = 7
MIN_DEGREE = 3


class InsufficientNamesError(Exception):
    """Raised when the name pool cannot give every room a unique name."""

    def __init__(self, *, available: int, required: int) -> None:
        self.available = available
        self.required = required
        super().__init__(
            f"Name pool has {available} distinct names but {required} rooms need one each.\n"
            "Add names to the pool (or ROOMWALK_ROOM_NAMES) and try again."
        )


class GraphConstructionError(Exception):
    """Raised when no connected wiring was found within the attempt budget."""

    def __init__(self, *, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Could not wire a connected maze after {attempts} attempts")


class GraphBuilder:
    """Builds random room graphs.

    Args:
        rng: Source of randomness. Pass a seeded ``random.Random`` for
            reproducible mazes; defaults to a fresh unseeded instance.
        room_count: Number of rooms (the game always uses 7).
        min_degree: Minimum number of connections per room.
        require_connected: Re-wire until every room is reachable from START.
        max_attempts: Wiring attempts before ``GraphConstructionError``.
        verbose: Log construction steps.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        room_count: int = ROOM_COUNT,
        min_degree: int = MIN_DEGREE,
        require_connected: bool = True,
        max_attempts: int = 100,
        verbose: bool = False,
    ) -> None:
        if room_count < 2:
            raise ValueError("room_count must be at least 2 (START and END differ)")
        if not 0 <= min_degree < room_count:
            raise ValueError(
                f"min_degree must be between 0 and room_count - 1, got {min_degree}"
            )
        if max_attempts < 1:
            raise ValueError("max_attempts must be positive")
        self.rng = rng or random.Random()
        self.room_count = room_count
        self.min_degree = min_degree
        self.require_connected = require_connected
        self.max_attempts = max_attempts
        self.verbose = verbose

    def build(self, name_pool: Iterable[str]) -> RoomGraph:
        """Construct a new maze from ``name_pool``.

        Raises:
            InsufficientNamesError: Fewer distinct names than rooms.
            GraphConstructionError: No connected wiring within ``max_attempts``.
        """
        # dict.fromkeys keeps pool order while dropping repeats
        pool = list(dict.fromkeys(name_pool))
        if len(pool) < self.room_count:
            raise InsufficientNamesError(available=len(pool), required=self.room_count)

        names = self._draw_names(pool)
        start_id, end_id = self._pick_start_end()

        for attempt in range(1, self.max_attempts + 1):
            neighbors = self._wire_connections()
            graph = self._freeze(names, neighbors, start_id, end_id)
            if not self.require_connected or is_connected(graph):
                if self.verbose:
                    degrees = ", ".join(f"{room.name}={room.degree}" for room in graph)
                    log_deterministic(
                        f"Built maze in {attempt} attempt(s): "
                        f"START={graph.start.name!r} END={graph.end.name!r} degrees[{degrees}]"
                    )
                return graph
            if self.verbose:
                log_error(f"Wiring attempt {attempt} left rooms unreachable from START; retrying")

        raise GraphConstructionError(attempts=self.max_attempts)

    def _draw_names(self, pool: List[str]) -> List[str]:
        names: List[str] = []
        # pool is the private copy made in build(); it shrinks by one per draw
        for _ in range(self.room_count):
            # Swap-remove: move the last name into the drawn slot
            index = self.rng.randrange(len(pool))
            pool[index], pool[-1] = pool[-1], pool[index]
            names.append(pool.pop())
        return names

    def _pick_start_end(self) -> tuple[int, int]:
        start_id = self.rng.randrange(self.room_count)
        # END is uniform over every room except START
        end_id = self.rng.randrange(self.room_count)
        while end_id == start_id:
            end_id = self.rng.randrange(self.room_count)
        return start_id, end_id

    def _wire_connections(self) -> List[Set[int]]:
        neighbors: List[Set[int]] = [set() for _ in range(self.room_count)]
        for room_id in range(self.room_count):
            # Only this room's deficit drives the loop; earlier rooms may gain
            # extra connections here and are not revisited
            while len(neighbors[room_id]) < self.min_degree:
                candidate = self.rng.randrange(self.room_count)
                # Self loops and repeat edges are re-rolled
                if candidate == room_id or candidate in neighbors[room_id]:
                    continue
                _connect(neighbors, room_id, candidate)
        return neighbors

    @staticmethod
    def _freeze(
        names: List[str], neighbors: List[Set[int]], start_id: int, end_id: int
    ) -> RoomGraph:
        rooms = []
        for room_id, name in enumerate(names):
            if room_id == start_id:
                kind = RoomKind.START
            elif room_id == end_id:
                kind = RoomKind.END
            else:
                kind = RoomKind.MID
            rooms.append(Room(id=room_id, name=name, kind=kind, neighbors=frozenset(neighbors[room_id])))
        return RoomGraph(rooms=tuple(rooms), start_id=start_id, end_id=end_id)


def _connect(neighbors: List[Set[int]], a: int, b: int) -> None:
    # Both sides in one place: no caller ever sees a one-way edge
    neighbors[a].add(b)
    neighbors[b].add(a)


def build_graph(
    name_pool: Iterable[str],
    *,
    rng: Optional[random.Random] = None,
    require_connected: bool = True,
    verbose: bool = False,
) -> RoomGraph:
    """Build a standard 7-room maze with minimum degree 3."""
    builder = GraphBuilder(rng, require_connected=require_connected, verbose=verbose)
    return builder.build(name_pool)
