from __future__ import annotations
import argparse
import logging
import os
import random
import sys
from typing import Any, Dict, List, Mapping, Optional, Tuple

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console

from .errors import SetupError
from .models import SimConfig
from .render import render_roster, render_session, stats_line
from .sim.engine import Legislature
from .state import build_legislature, party_summary

logger = logging.getLogger(__name__)

ENV_KEYS = {
    "num_seats": "LEGSIM_SEATS",
    "num_parties": "LEGSIM_PARTIES",
    "sessions": "LEGSIM_SESSIONS",
    "seed": "LEGSIM_SEED",
    "exclude_advocate": "LEGSIM_EXCLUDE_ADVOCATE",
    "adjectives_path": "LEGSIM_ADJECTIVES",
    "nouns_path": "LEGSIM_NOUNS",
}


def config_from_env(env: Mapping[str, str]) -> Dict[str, Any]:
    # Raw strings; SimConfig does the coercion and bounds checks.
    return {field: env[key] for field, key in ENV_KEYS.items() if env.get(key)}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="legsim",
        description="Simulate a small legislature voting on random bills.",
    )
    parser.add_argument("--seats", dest="num_seats", type=int, help="Number of legislators (default 20)")
    parser.add_argument("--parties", dest="num_parties", type=int, help="Number of parties (default 3)")
    parser.add_argument("--sessions", type=int, help="Stop after this many sessions")
    parser.add_argument("--seed", type=int, help="Seed for the random source")
    parser.add_argument("--exclude-advocate", action="store_true", default=None,
                        help="Do not poll the advocate a second time in the tally")
    parser.add_argument("--no-pause", dest="pause", action="store_false", default=None,
                        help="Run sessions without waiting for Enter")
    parser.add_argument("--adjectives", dest="adjectives_path", help="Adjective word list")
    parser.add_argument("--nouns", dest="nouns_path", help="Noun word list")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def config_from_args(args: argparse.Namespace, env: Mapping[str, str]) -> SimConfig:
    values = config_from_env(env)
    overrides = {k: v for k, v in vars(args).items() if k != "verbose" and v is not None}
    values.update(overrides)
    return SimConfig(**values)


def load_config(argv: Optional[List[str]] = None, env: Optional[Mapping[str, str]] = None) -> Tuple[SimConfig, bool]:
    args = build_parser().parse_args(argv)
    return config_from_args(args, os.environ if env is None else env), args.verbose


def run_sessions(legislature: Legislature, config: SimConfig, console: Console) -> None:
    held = 0
    while config.sessions is None or held < config.sessions:
        if config.pause:
            try:
                answer = console.input("[dim]Enter for the next session, q to quit: [/dim]")
            except EOFError:
                break
            if answer.strip().lower() == "q":
                break
        render_session(console, legislature.hold_session())
        held += 1
        console.print()
    logger.info("Held %d sessions", held)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        config = config_from_args(args, os.environ)
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if config.sessions is None and not config.pause:
        logger.error("--no-pause needs --sessions, otherwise the loop never ends")
        return 2

    rng = random.Random(config.seed)
    try:
        legislature, parties = build_legislature(config, rng)
    except SetupError as e:
        logger.error("Setup failed: %s", e)
        return 2

    console = Console()
    render_roster(console, legislature.legislators, party_summary(legislature.legislators, parties))
    console.print()
    run_sessions(legislature, config, console)
    console.print(stats_line(legislature.stats()), highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
