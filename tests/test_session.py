"""Tests for the interactive transcript loop."""

import io

from roomwalk.navigation import NavigationEngine, NavigationPhase
from roomwalk.persistence import InMemoryPersistence
from roomwalk.session import UNRECOGNIZED_MESSAGE, format_prompt, run_session


def test_format_prompt():
    assert format_prompt("Kitchen", ["Dark Closet", "Dining Room"]) == (
        "CURRENT LOCATION: Kitchen\n"
        "POSSIBLE CONNECTIONS: Dark Closet, Dining Room.\n"
        "WHERE TO? >"
    )


def test_session_plays_to_victory(sample_graph):
    engine = NavigationEngine(sample_graph)
    output = io.StringIO()

    state = run_session(
        engine,
        input_stream=io.StringIO("Z\nB\nE\nG\n"),
        output_stream=output,
    )

    assert state.phase is NavigationPhase.WON
    assert state.step_history == ["B", "E", "G"]

    transcript = output.getvalue()
    assert transcript.startswith(
        "CURRENT LOCATION: A\nPOSSIBLE CONNECTIONS: B, C, D.\nWHERE TO? >\n"
    )
    assert f"{UNRECOGNIZED_MESSAGE}\n\n" in transcript
    assert "CURRENT LOCATION: B\nPOSSIBLE CONNECTIONS: A, E, F.\n" in transcript
    assert transcript.endswith(
        "YOU HAVE FOUND THE END ROOM. CONGRATULATIONS!\n"
        "YOU TOOK 3 STEPS. YOUR PATH TO VICTORY WAS:\n"
        "B\nE\nG\n"
    )
    # The rejected input re-prompts from the same room
    assert transcript.count("CURRENT LOCATION: A\n") == 2


def test_session_accepts_windows_line_endings(sample_graph):
    engine = NavigationEngine(sample_graph)
    state = run_session(
        engine,
        input_stream=io.StringIO("C\r\nG\r\n"),
        output_stream=io.StringIO(),
    )
    assert state.phase is NavigationPhase.WON


def test_session_stops_at_end_of_input(sample_graph):
    engine = NavigationEngine(sample_graph)
    output = io.StringIO()

    state = run_session(engine, input_stream=io.StringIO("B\n"), output_stream=output)

    assert state.phase is NavigationPhase.AWAITING_INPUT
    assert state.step_history == ["B"]
    assert "CONGRATULATIONS" not in output.getvalue()


def test_session_records_steps_in_persistence(sample_graph):
    persistence = InMemoryPersistence()
    persistence.save_graph(sample_graph)
    engine = NavigationEngine(sample_graph)
    output = io.StringIO()

    run_session(
        engine,
        input_stream=io.StringIO("D\nnope\nF\nG\n"),
        output_stream=output,
        persistence=persistence,
    )

    assert persistence.get_steps() == ["D", "F", "G"]
    assert output.getvalue().endswith("YOUR PATH TO VICTORY WAS:\nD\nF\nG\n")
