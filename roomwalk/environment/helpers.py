"""Utilities for room graphs: search, reachability and invariant checks."""

from __future__ import annotations

from collections import Counter, deque
from typing import List, Optional, Set, Tuple

from .graph import RoomGraph, RoomKind


def shortest_path(graph: RoomGraph, start: int, goal: int) -> Optional[List[int]]:
    """Return a list of room ids from start to goal using BFS.

    Returns None if no path exists (disconnected graph). The path includes
    both start and goal. Neighbors are expanded in ascending id order, so ties
    resolve the same way every time.
    """

    # Already there: a single-room path
    if start == goal:
        return [start]
    visited = {start}
    # Queue holds (room, path that reached it); FIFO order explores layer by layer
    queue: deque[Tuple[int, List[int]]] = deque([(start, [start])])

    while queue:
        room_id, path = queue.popleft()
        for neighbor in graph.neighbors(room_id):
            if neighbor in visited:
                continue
            # Mark on enqueue so a room is never queued twice
            visited.add(neighbor)
            new_path = path + [neighbor]
            # First arrival at goal is a shortest path
            if neighbor == goal:
                return new_path
            queue.append((neighbor, new_path))
    # Queue exhausted: goal sits in another component
    return None


def reachable_from(graph: RoomGraph, start: int) -> Set[int]:
    """Every room id reachable from ``start`` (including ``start``)."""
    seen = {start}
    # Plain flood fill; order does not matter, only coverage
    queue = deque([start])
    while queue:
        room_id = queue.popleft()
        for neighbor in graph.neighbors(room_id):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


def is_connected(graph: RoomGraph) -> bool:
    """True when every room can be reached from START."""
    if not graph.rooms:
        return True
    return len(reachable_from(graph, graph.start_id)) == len(graph)


def validate_room_move(graph: RoomGraph, current: int, target_name: str) -> Optional[int]:
    """Resolve a player's typed destination.

    Returns the target room id when ``target_name`` exactly matches the name
    of a room adjacent to ``current``, otherwise None.
    """
    # Only exits of the current room count; a name elsewhere in the maze does not
    for neighbor in graph.neighbors(current):
        # Exact comparison: no case folding, no whitespace trimming
        if graph.room(neighbor).name == target_name:
            return neighbor
    return None


def validate_graph(graph: RoomGraph, *, min_degree: int = 3) -> List[str]:
    """Check the structural invariants of a maze.

    Returns a list of human-readable problems; an empty list means the graph
    is valid. Used on graphs read back from disk and in tests.
    """
    problems: List[str] = []
    size = len(graph)

    # Per-room checks: id slot, self loops, edge symmetry, degree floor
    for index, room in enumerate(graph.rooms):
        if room.id != index:
            problems.append(f"room at position {index} has id {room.id}")
        if room.id in room.neighbors:
            problems.append(f"room {room.name!r} connects to itself")
        for other in room.neighbors:
            if not 0 <= other < size:
                problems.append(f"room {room.name!r} connects to missing room {other}")
            elif room.id not in graph.room(other).neighbors:
                problems.append(
                    f"connection {room.name!r} -> {graph.room(other).name!r} is one-way"
                )
        if room.degree < min_degree:
            problems.append(
                f"room {room.name!r} has {room.degree} connections (minimum {min_degree})"
            )

    # Names are how players move, so they must be unique
    duplicates = [name for name, count in Counter(r.name for r in graph.rooms).items() if count > 1]
    for name in duplicates:
        problems.append(f"room name {name!r} is used more than once")

    # Role tags: exactly one START and one END, matching start_id/end_id
    kinds = Counter(room.kind for room in graph.rooms)
    if kinds[RoomKind.START] != 1:
        problems.append(f"expected one START room, found {kinds[RoomKind.START]}")
    if kinds[RoomKind.END] != 1:
        problems.append(f"expected one END room, found {kinds[RoomKind.END]}")
    if not 0 <= graph.start_id < size or graph.start.kind is not RoomKind.START:
        problems.append("start_id does not point at the START room")
    if not 0 <= graph.end_id < size or graph.end.kind is not RoomKind.END:
        problems.append("end_id does not point at the END room")
    if graph.start_id == graph.end_id:
        problems.append("START and END are the same room")

    return problems
