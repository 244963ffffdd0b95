"""Command-line entry point.

Builds a maze, mirrors it to a per-process rooms directory, and plays one
session on stdin/stdout:

    roomwalk --seed 42
    python -m roomwalk --no-persist

Environment variables (see ``roomwalk.config``) provide defaults; flags win.
Exit status is 0 when the END room is reached and 1 on setup failure or when
input ends first.
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .builder import GraphBuilder, GraphConstructionError, InsufficientNamesError
from .config import Config
from .logging_utils import log_error, log_info, log_success
from .navigation import NavigationEngine, NavigationPhase
from .persistence import JsonPersistence, PersistenceError, RoomPersistence
from .session import run_session


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="roomwalk",
        description="Find your way from the START room to the END room",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible maze")
    parser.add_argument(
        "--rooms-dir",
        type=Path,
        default=None,
        help="Directory for the room files (default: <prefix>.rooms.<pid>)",
    )
    parser.add_argument(
        "--no-persist",
        action="store_true",
        help="Do not write room files; play from memory only",
    )
    keep = parser.add_mutually_exclusive_group()
    keep.add_argument("--keep-rooms", dest="keep_rooms", action="store_true", default=None,
                      help="Leave the rooms directory in place after the game")
    keep.add_argument("--remove-rooms", dest="keep_rooms", action="store_false",
                      help="Delete the rooms directory after the game")
    parser.add_argument("--verbose", action="store_true", help="Log maze construction details")
    parser.add_argument("--show-config", action="store_true", help="Print configuration and exit")
    return parser.parse_args(argv)


def main(
    argv: Optional[List[str]] = None,
    *,
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)

    try:
        Config.validate()
    except ValueError as exc:
        log_error(str(exc))
        return 1

    if args.show_config:
        print(Config.display(), file=output_stream or sys.stdout)
        return 0

    verbose = args.verbose or Config.VERBOSE
    seed = args.seed if args.seed is not None else Config.seed()
    persist = Config.PERSIST and not args.no_persist
    keep_rooms = Config.KEEP_ROOMS if args.keep_rooms is None else args.keep_rooms

    rng = random.Random(seed)
    if verbose:
        log_info(f"Seed: {seed if seed is not None else 'random'}")

    try:
        graph = GraphBuilder(rng, verbose=verbose).build(Config.room_names())
    except (InsufficientNamesError, GraphConstructionError) as exc:
        log_error(str(exc))
        return 1

    persistence: Optional[RoomPersistence] = None
    if persist:
        rooms_dir = args.rooms_dir or Config.rooms_dir()
        persistence = JsonPersistence(rooms_dir, remove_on_close=not keep_rooms)
        try:
            persistence.initialize()
            persistence.save_graph(graph)
            # Play from what was written so the mirror is what the player walks
            graph = persistence.load_graph()
        except (OSError, PersistenceError) as exc:
            log_error(f"Could not write room files to {rooms_dir}: {exc}")
            return 1
        if verbose:
            log_info(f"Room files written to {rooms_dir}")

    engine = NavigationEngine(graph)
    try:
        final_state = run_session(
            engine,
            input_stream=input_stream,
            output_stream=output_stream,
            persistence=persistence,
        )
    except (OSError, PersistenceError) as exc:
        log_error(f"Could not record the step log: {exc}")
        return 1
    finally:
        if persistence is not None:
            persistence.close()

    if final_state.phase is NavigationPhase.WON:
        if verbose:
            log_success(f"Finished in {final_state.step_count} steps")
        return 0
    log_error("Input ended before the END room was reached")
    return 1


def run() -> None:
    sys.exit(main())
