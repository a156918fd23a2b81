"""
Command line runner for simple scripts.

Usage: python -m simple_ui [SCRIPT.json]

Reads a JSON array of commands from SCRIPT (or stdin), runs it through the
renderer and prints the resulting event as one JSON line.
"""

import argparse
import asyncio
import signal
import sys
from typing import List, Optional

import orjson
from pydantic import ValidationError

from .commands import load_script
from .config import SimpleConfig
from .errors import SimpleError
from .executor import SimpleExecutor
from .logging import configure_logging

EXIT_CONFIG_ERROR = 1
EXIT_EXECUTION_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m simple_ui",
        description="Run a JSON command script through the simple renderer",
    )
    parser.add_argument(
        "script",
        nargs="?",
        help="Path to a JSON array of commands (default: read stdin)",
    )
    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    """Load config and script, run it, print the event."""
    args = build_parser().parse_args(argv)

    try:
        config = SimpleConfig.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logger = configure_logging(config.log_level, fmt=config.log_format)

    try:
        if args.script:
            with open(args.script, "rb") as f:
                raw = f.read()
        else:
            raw = sys.stdin.buffer.read()
        commands = load_script(raw)
    except (OSError, orjson.JSONDecodeError, ValidationError) as e:
        logger.error(f"Invalid script: {e}")
        return EXIT_CONFIG_ERROR

    logger.info(f"Running {len(commands)} commands through {config.simple_path}")

    executor = SimpleExecutor(config)
    handle = executor.start(commands)

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, handle.cancel)

    try:
        event = await handle
    except asyncio.CancelledError:
        logger.info("Script cancelled")
        return EXIT_EXECUTION_ERROR
    except SimpleError as e:
        logger.error(f"Script failed: {e}")
        return EXIT_EXECUTION_ERROR
    finally:
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(sig)

    if event is not None:
        sys.stdout.write(orjson.dumps(event.model_dump()).decode() + "\n")
        sys.stdout.flush()
    return 0


def run() -> None:
    """Entry point for the runner."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
