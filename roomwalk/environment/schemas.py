"""Pydantic schemas for the on-disk room records.

These models mirror the frozen dataclasses in ``graph.py`` but keep the
serialized form name-based (connections are listed by room name, as a player
sees them) and validated on the way back in.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

from .graph import Room, RoomGraph, RoomKind


class RoomState(BaseModel):
    """One serialized room record."""

    id: int = Field(..., ge=0, description="Stable room index")
    name: str = Field(..., min_length=1)
    kind: RoomKind = Field(RoomKind.MID, description="START_ROOM, END_ROOM or MID_ROOM")
    connections: List[str] = Field(
        default_factory=list,
        description="Names of connected rooms in ascending id order",
    )

    @field_validator("connections")
    @classmethod
    def _no_duplicate_connections(cls, value: List[str]) -> List[str]:
        if len(set(value)) != len(value):
            raise ValueError("connections must not repeat a room")
        return value


class RoomGraphState(BaseModel):
    """Every room record of one maze."""

    rooms: List[RoomState] = Field(default_factory=list)

    @classmethod
    def from_graph(cls, graph: RoomGraph) -> "RoomGraphState":
        return cls(
            rooms=[
                RoomState(
                    id=room.id,
                    name=room.name,
                    kind=room.kind,
                    connections=graph.neighbor_names(room.id),
                )
                for room in graph
            ]
        )

    def to_graph(self) -> RoomGraph:
        """Rebuild a ``RoomGraph``.

        Raises:
            ValueError: If ids are not 0..n-1, a connection names an unknown
                room, or START/END are not each present exactly once.
        """
        records = sorted(self.rooms, key=lambda r: r.id)
        if [r.id for r in records] != list(range(len(records))):
            raise ValueError("room ids must be contiguous from 0")

        ids_by_name = {r.name: r.id for r in records}
        if len(ids_by_name) != len(records):
            raise ValueError("room names must be unique")

        starts = [r.id for r in records if r.kind is RoomKind.START]
        ends = [r.id for r in records if r.kind is RoomKind.END]
        if len(starts) != 1 or len(ends) != 1:
            raise ValueError("exactly one START_ROOM and one END_ROOM required")

        rooms = []
        for record in records:
            unknown = [name for name in record.connections if name not in ids_by_name]
            if unknown:
                raise ValueError(f"room {record.name!r} connects to unknown rooms {unknown}")
            rooms.append(
                Room(
                    id=record.id,
                    name=record.name,
                    kind=record.kind,
                    neighbors=frozenset(ids_by_name[name] for name in record.connections),
                )
            )
        return RoomGraph(rooms=tuple(rooms), start_id=starts[0], end_id=ends[0])
