"""Interactive transcript loop: prompt, read a room name, move, repeat.

Streams are injected so the loop runs the same against a terminal and
against ``io.StringIO`` in tests.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .navigation import NavigationEngine, NavigationState, UnrecognizedRoomError
from .persistence import RoomPersistence

UNRECOGNIZED_MESSAGE = "HUH? I DON'T UNDERSTAND THAT ROOM. TRY AGAIN."


def format_prompt(room_name: str, neighbor_names: List[str]) -> str:
    return (
        f"CURRENT LOCATION: {room_name}\n"
        f"POSSIBLE CONNECTIONS: {', '.join(neighbor_names)}.\n"
        "WHERE TO? >"
    )


def format_summary(step_count: int, step_history: List[str]) -> str:
    lines = [
        "YOU HAVE FOUND THE END ROOM. CONGRATULATIONS!",
        f"YOU TOOK {step_count} STEPS. YOUR PATH TO VICTORY WAS:",
        *step_history,
    ]
    return "\n".join(lines)


def run_session(
    engine: NavigationEngine,
    *,
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
    persistence: Optional[RoomPersistence] = None,
) -> NavigationState:
    """Play until END is reached or input runs out.

    Each accepted move is also appended to ``persistence`` when given, and the
    victory path is then read back from it.

    Returns:
        Final traversal state; ``phase`` tells whether the player won.
    """
    input_stream = input_stream or sys.stdin
    output_stream = output_stream or sys.stdout

    while not engine.is_won:
        room_name, neighbor_names = engine.describe_current_room()
        output_stream.write(format_prompt(room_name, neighbor_names))
        output_stream.flush()

        line = input_stream.readline()
        if not line:
            # EOF before reaching END
            output_stream.write("\n")
            return engine.state
        choice = line.rstrip("\r\n")
        output_stream.write("\n")

        try:
            room = engine.submit_choice(choice)
        except UnrecognizedRoomError:
            output_stream.write(f"{UNRECOGNIZED_MESSAGE}\n\n")
            continue

        if persistence is not None:
            persistence.append_step(room.name)

    step_count, step_history = engine.finalize()
    if persistence is not None:
        step_history = persistence.get_steps()
    output_stream.write(format_summary(step_count, step_history) + "\n")
    output_stream.flush()
    return engine.state
