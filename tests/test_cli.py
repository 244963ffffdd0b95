"""End-to-end tests for the command-line entry point."""

import io
import random

import pytest

from roomwalk.builder import GraphBuilder
from roomwalk.cli import main
from roomwalk.config import Config
from roomwalk.environment import shortest_path


@pytest.fixture(autouse=True)
def default_config(monkeypatch, tmp_path):
    monkeypatch.setattr(Config, "SEED", None)
    monkeypatch.setattr(Config, "ROOM_NAMES", None)
    monkeypatch.setattr(Config, "PERSIST", True)
    monkeypatch.setattr(Config, "KEEP_ROOMS", True)
    monkeypatch.setattr(Config, "VERBOSE", False)
    monkeypatch.setattr(Config, "ROOMS_ROOT", tmp_path)
    monkeypatch.setattr(Config, "ROOMS_PREFIX", "roomwalk")


def winning_input(seed: int) -> str:
    graph = GraphBuilder(random.Random(seed)).build(Config.room_names())
    path = shortest_path(graph, graph.start_id, graph.end_id)
    return "".join(graph.room(room_id).name + "\n" for room_id in path[1:])


def test_main_wins_from_memory():
    output = io.StringIO()
    code = main(
        ["--seed", "11", "--no-persist"],
        input_stream=io.StringIO(winning_input(11)),
        output_stream=output,
    )
    assert code == 0
    assert "CONGRATULATIONS" in output.getvalue()


def test_main_writes_room_files(tmp_path):
    rooms_dir = tmp_path / "mirror"
    output = io.StringIO()
    code = main(
        ["--seed", "4", "--rooms-dir", str(rooms_dir), "--keep-rooms"],
        input_stream=io.StringIO(winning_input(4)),
        output_stream=output,
    )
    assert code == 0
    assert len(list(rooms_dir.glob("room_*.json"))) == 7
    assert (rooms_dir / "steps.jsonl").exists()


def test_main_default_rooms_dir_uses_pid(tmp_path, monkeypatch):
    monkeypatch.setattr("os.getpid", lambda: 4242)
    code = main(
        ["--seed", "2"],
        input_stream=io.StringIO(winning_input(2)),
        output_stream=io.StringIO(),
    )
    assert code == 0
    assert (tmp_path / "roomwalk.rooms.4242" / "room_0.json").exists()


def test_main_remove_rooms(tmp_path):
    rooms_dir = tmp_path / "mirror"
    code = main(
        ["--seed", "8", "--rooms-dir", str(rooms_dir), "--remove-rooms"],
        input_stream=io.StringIO(winning_input(8)),
        output_stream=io.StringIO(),
    )
    assert code == 0
    assert not rooms_dir.exists()


def test_main_seed_from_config(monkeypatch):
    monkeypatch.setattr(Config, "SEED", "6")
    code = main(
        ["--no-persist"],
        input_stream=io.StringIO(winning_input(6)),
        output_stream=io.StringIO(),
    )
    assert code == 0


def test_main_insufficient_names(monkeypatch, capsys):
    monkeypatch.setattr(Config, "ROOM_NAMES", "Hall, Attic, Cellar")
    code = main(["--no-persist"], input_stream=io.StringIO(""), output_stream=io.StringIO())
    assert code == 1
    assert "3 distinct names" in capsys.readouterr().err


def test_main_end_of_input_is_failure(capsys):
    output = io.StringIO()
    code = main(["--seed", "1", "--no-persist"], input_stream=io.StringIO(""), output_stream=output)
    assert code == 1
    assert "CURRENT LOCATION" in output.getvalue()
    assert "Input ended" in capsys.readouterr().err


def test_main_invalid_seed_config(monkeypatch, capsys):
    monkeypatch.setattr(Config, "SEED", "abc")
    code = main(["--no-persist"], input_stream=io.StringIO(""), output_stream=io.StringIO())
    assert code == 1
    assert "ROOMWALK_SEED" in capsys.readouterr().err


def test_main_show_config():
    output = io.StringIO()
    assert main(["--show-config"], output_stream=output) == 0
    assert "Roomwalk Configuration" in output.getvalue()


def test_main_unwritable_rooms_dir(tmp_path, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", "utf-8")
    code = main(
        ["--seed", "1", "--rooms-dir", str(blocker / "rooms")],
        input_stream=io.StringIO(""),
        output_stream=io.StringIO(),
    )
    assert code == 1
    assert "Could not write room files" in capsys.readouterr().err


def test_main_step_log_failure_exits_cleanly(tmp_path, monkeypatch, capsys):
    def broken_append(self, room_name):
        raise OSError("No space left on device")

    monkeypatch.setattr("roomwalk.persistence.JsonPersistence.append_step", broken_append)
    code = main(
        ["--seed", "5", "--rooms-dir", str(tmp_path / "mirror")],
        input_stream=io.StringIO(winning_input(5)),
        output_stream=io.StringIO(),
    )
    assert code == 1
    assert "Could not record the step log" in capsys.readouterr().err
