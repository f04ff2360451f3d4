"""CLI entry point for the takeout app."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from takeout.config import load_config
from takeout.errors import ExhaustedSources
from takeout.resolver import require_content, resolve_content

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Takeout: shuffled affirmations")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Path to a YAML config file (default: config.yaml in the project root)",
    )
    sub = parser.add_subparsers(dest="command")

    # run command
    run_parser = sub.add_parser("run", help="Launch the terminal UI (default)")
    run_parser.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Debug logging",
    )
    run_parser.add_argument(
        "--log-file", default=None,
        help="Write logs here instead of the configured log_file",
    )

    # resolve command
    resolve_parser = sub.add_parser(
        "resolve", help="Fetch affirmations once and print where they came from",
    )
    resolve_parser.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Debug logging",
    )

    args = parser.parse_args(argv)
    config = load_config(args.config)
    level = logging.DEBUG if args.verbose else logging.INFO

    if args.command == "resolve":
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
        result = asyncio.run(resolve_content(config))
        try:
            affirmations = require_content(result)
        except ExhaustedSources as e:
            print(f"Error loading affirmations ({type(e).__name__}): no source returned any items.")
            print(f"Please make sure the backend is running at {config.api.url}")
            for failure in result.failures:
                print(f"  - {failure}")
            return 1
        print(f"{len(affirmations)} affirmations ({result.origin.value})")
        for text in affirmations:
            print(f"  {text}")
        return 0

    # Logs go to a file so they don't draw over the UI
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        filename=getattr(args, "log_file", None) or config.log_file,
    )
    logging.getLogger(__name__).info("API endpoint: %s", config.endpoint)

    from takeout.app import TakeoutApp
    TakeoutApp(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
