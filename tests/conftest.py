"""Shared fixtures: a small hand-wired maze with known topology."""

from __future__ import annotations

import pytest

from roomwalk.environment import Room, RoomGraph, RoomKind

# A is START, G is END. Every room has at least three connections.
SAMPLE_ADJACENCY = {
    "A": "BCD",
    "B": "AEF",
    "C": "AEG",
    "D": "AFG",
    "E": "BCG",
    "F": "BDG",
    "G": "CDEF",
}


def make_graph(adjacency: dict[str, str], start: str, end: str) -> RoomGraph:
    names = sorted(adjacency)
    ids = {name: index for index, name in enumerate(names)}
    rooms = []
    for name in names:
        if name == start:
            kind = RoomKind.START
        elif name == end:
            kind = RoomKind.END
        else:
            kind = RoomKind.MID
        rooms.append(
            Room(
                id=ids[name],
                name=name,
                kind=kind,
                neighbors=frozenset(ids[other] for other in adjacency[name]),
            )
        )
    return RoomGraph(rooms=tuple(rooms), start_id=ids[start], end_id=ids[end])


@pytest.fixture
def sample_graph() -> RoomGraph:
    return make_graph(SAMPLE_ADJACENCY, start="A", end="G")


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setenv("ROOMWALK_NO_COLOR", "1")
