"""CLI entry point: python -m dugout <snapshot.json>"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from dugout.config import ConfigError, default_config, load_config
from dugout.core.feed import SnapshotWatcher
from dugout.live import run_live


def main() -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="dugout",
        description="Live baseball dashboard for the terminal",
    )
    parser.add_argument(
        "snapshot",
        type=Path,
        help="Path to the game snapshot JSON file (re-read when it changes)",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=os.environ.get("DUGOUT_CONFIG"),
        help="Path to dashboard YAML config file (default: $DUGOUT_CONFIG)",
    )
    parser.add_argument(
        "--no-title",
        action="store_true",
        default=False,
        help="Leave the terminal title alone",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write debug logs to this file",
    )
    args = parser.parse_args()

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if not args.snapshot.exists():
        print(f"Error: snapshot file not found: {args.snapshot}", file=sys.stderr)
        sys.exit(1)

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        try:
            config = load_config(config_path)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        config = default_config()
    if args.no_title:
        config.title = False

    run_live(config, SnapshotWatcher(args.snapshot))


if __name__ == "__main__":
    main()
