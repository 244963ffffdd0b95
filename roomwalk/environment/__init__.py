"""Room graph types, schemas and helpers."""

from .graph import Room, RoomGraph, RoomKind
from .schemas import RoomGraphState, RoomState
from .helpers import (
    is_connected,
    reachable_from,
    shortest_path,
    validate_graph,
    validate_room_move,
)

__all__ = [
    "Room",
    "RoomGraph",
    "RoomKind",
    "RoomGraphState",
    "RoomState",
    "is_connected",
    "reachable_from",
    "shortest_path",
    "validate_graph",
    "validate_room_move",
]
