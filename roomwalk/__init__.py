"""
Roomwalk - a small text adventure over a random room graph.

Seven rooms, each with at least three connections. Start in the START room,
type the name of a connected room to walk there, and keep going until you
reach the END room.

No file I/O required: the room mirror on disk is optional.
"""

__version__ = "0.1.0"

from .builder import (
    GraphBuilder,
    GraphConstructionError,
    InsufficientNamesError,
    build_graph,
)
from .environment import (
    Room,
    RoomGraph,
    RoomGraphState,
    RoomKind,
    RoomState,
    is_connected,
    reachable_from,
    shortest_path,
    validate_graph,
)
from .names import DEFAULT_ROOM_NAMES
from .navigation import (
    NavigationEngine,
    NavigationPhase,
    NavigationState,
    SessionNotWonError,
    SessionOverError,
    UnrecognizedRoomError,
)
from .persistence import (
    InMemoryPersistence,
    JsonPersistence,
    PersistenceError,
    RoomPersistence,
)
from .session import run_session

__all__ = [
    # Graph construction
    "GraphBuilder",
    "build_graph",
    "DEFAULT_ROOM_NAMES",
    "InsufficientNamesError",
    "GraphConstructionError",
    # Graph types and helpers
    "Room",
    "RoomGraph",
    "RoomKind",
    "RoomState",
    "RoomGraphState",
    "is_connected",
    "reachable_from",
    "shortest_path",
    "validate_graph",
    # Navigation
    "NavigationEngine",
    "NavigationPhase",
    "NavigationState",
    "UnrecognizedRoomError",
    "SessionOverError",
    "SessionNotWonError",
    "run_session",
    # Persistence
    "RoomPersistence",
    "InMemoryPersistence",
    "JsonPersistence",
    "PersistenceError",
]
