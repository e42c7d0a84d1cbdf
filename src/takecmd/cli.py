"""Command-line entry point.

Usage:
    # Run a session with the default settings
    takecmd

    # Reproducible briefing from a custom settings file
    takecmd --config config/flood_drill.yaml --seed 42

    # Write the effective settings to a file for editing
    takecmd --write-config config/takecmd.yaml

Exit codes:
    0: Session completed (or settings written)
    1: Configuration or generation error
    130: Interrupted
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from takecmd.core.config import get_default_config_path, load_settings, save_settings
from takecmd.core.errors import TakeCommandError
from takecmd.session import Session, SessionSeeds

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="takecmd",
        description="Generate a disaster scenario briefing and take command",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Settings file (.yaml, .yml or .json). Default: $TAKECMD_CONFIG, "
        "./config/takecmd.yaml, then the packaged defaults",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible briefing",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen before the briefing",
    )
    parser.add_argument(
        "--write-config",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write the effective settings to PATH and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = load_settings(args.config or get_default_config_path())

        if args.write_config is not None:
            save_settings(settings, args.write_config)
            return 0

        session = Session(
            settings,
            seeds=SessionSeeds(random_seed=args.seed),
            clear_screen=not args.no_clear,
        )
        session.run()
    except (TakeCommandError, OSError, UnicodeDecodeError) as e:
        logger.debug("Session aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    return 0
