"""
RoomPersistence interface for mirroring a maze to storage.

Persistence is OPTIONAL: a session plays entirely from the in-memory graph.
The mirror exists so a maze can be inspected (or reloaded) after it is built,
and so the path a player took is recorded as they go.

Two included implementations:
1. InMemoryPersistence - dict-based storage, data lost on exit (tests)
2. JsonPersistence - one JSON file per room plus a JSONL step log

Everything here is synchronous: the game is single-threaded and a mirror
write happens once, before play begins.

Usage pattern:
    persistence = JsonPersistence(Config.rooms_dir())
    persistence.initialize()
    persistence.save_graph(graph)
    ...
    persistence.append_step("Kitchen")
    persistence.close()
"""

from __future__ import annotations

import json
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from .environment import RoomGraph, RoomGraphState, RoomState, validate_graph


class PersistenceError(Exception):
    """Raised when a stored maze is missing or cannot be parsed back."""


class RoomPersistence(ABC):
    """Abstract base class for maze storage backends.

    Method categories:
    1. Lifecycle: initialize(), close()
    2. Graph: save_graph(), load_graph()
    3. Step log: append_step(), get_steps()
    """

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the backend (create directories, open handles)."""

    @abstractmethod
    def close(self) -> None:
        """Release anything ``initialize`` acquired."""

    @abstractmethod
    def save_graph(self, graph: RoomGraph) -> None:
        """Store every room of ``graph``, replacing any previous maze."""

    @abstractmethod
    def load_graph(self) -> RoomGraph:
        """Rebuild the stored maze.

        Raises:
            PersistenceError: Nothing stored, or the stored records are invalid
        """

    @abstractmethod
    def append_step(self, room_name: str) -> None:
        """Record one room entered by the player."""

    @abstractmethod
    def get_steps(self) -> List[str]:
        """Return every recorded step in order."""


class InMemoryPersistence(RoomPersistence):
    """Dict-based storage. Records are kept serialized so loads go through validation."""

    def __init__(self) -> None:
        self.rooms: Dict[int, dict] = {}
        self.steps: List[str] = []

    def initialize(self) -> None:
        return None

    def close(self) -> None:
        return None

    def save_graph(self, graph: RoomGraph) -> None:
        state = RoomGraphState.from_graph(graph)
        self.rooms = {record.id: record.model_dump(mode="json") for record in state.rooms}
        self.steps = []

    def load_graph(self) -> RoomGraph:
        if not self.rooms:
            raise PersistenceError("No maze has been saved")
        return _rebuild(list(self.rooms.values()), source="memory")

    def append_step(self, room_name: str) -> None:
        self.steps.append(room_name)

    def get_steps(self) -> List[str]:
        return list(self.steps)


class JsonPersistence(RoomPersistence):
    """File-based mirror using JSON, one file per room.

    Directory structure:
    ```
    {base_path}/
      room_0.json      # {"id": 0, "name": ..., "kind": "START_ROOM", "connections": [...]}
      ...
      room_6.json
      steps.jsonl      # one JSON string per line, append-only
    ```

    Args:
        base_path: Directory for the room files (created by ``initialize``)
        remove_on_close: Delete the whole directory in ``close``
    """

    STEPS_FILE = "steps.jsonl"

    def __init__(self, base_path: Path | str, *, remove_on_close: bool = False) -> None:
        self.base_path = Path(base_path)
        self.remove_on_close = remove_on_close

    def initialize(self) -> None:
        self.base_path.mkdir(parents=True, exist_ok=True)

    def close(self) -> None:
        if self.remove_on_close and self.base_path.exists():
            shutil.rmtree(self.base_path)

    def save_graph(self, graph: RoomGraph) -> None:
        self.base_path.mkdir(parents=True, exist_ok=True)
        for stale in self._room_files():
            stale.unlink()
        state = RoomGraphState.from_graph(graph)
        for record in state.rooms:
            path = self.base_path / f"room_{record.id}.json"
            path.write_text(json.dumps(record.model_dump(mode="json"), indent=2), "utf-8")
        steps = self._steps_path()
        if steps.exists():
            steps.unlink()

    def load_graph(self) -> RoomGraph:
        files = self._room_files()
        if not files:
            raise PersistenceError(f"No room files found in {self.base_path}")
        payloads = []
        for path in files:
            try:
                payloads.append(json.loads(path.read_text("utf-8")))
            except json.JSONDecodeError as exc:
                raise PersistenceError(f"{path} is not valid JSON: {exc}") from exc
        return _rebuild(payloads, source=str(self.base_path))

    def append_step(self, room_name: str) -> None:
        with self._steps_path().open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(room_name))
            handle.write("\n")

    def get_steps(self) -> List[str]:
        path = self._steps_path()
        if not path.exists():
            return []
        return [json.loads(line) for line in path.read_text("utf-8").splitlines() if line.strip()]

    def _room_files(self) -> List[Path]:
        if not self.base_path.exists():
            return []
        return sorted(self.base_path.glob("room_*.json"))

    def _steps_path(self) -> Path:
        return self.base_path / self.STEPS_FILE


def _rebuild(payloads: List[dict], *, source: Optional[str] = None) -> RoomGraph:
    try:
        state = RoomGraphState(rooms=[RoomState.model_validate(item) for item in payloads])
        graph = state.to_graph()
    except (ValidationError, ValueError) as exc:
        raise PersistenceError(f"Stored maze in {source} is invalid: {exc}") from exc

    # Records can be well-formed yet describe a broken maze (one-way or self
    # connections, too few exits)
    problems = validate_graph(graph)
    if problems:
        raise PersistenceError(
            f"Stored maze in {source} breaks room invariants: " + "; ".join(problems)
        )
    return graph
