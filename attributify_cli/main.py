"""attributify entry point.

Runs the attribute extractor over files from the shell and prints the
resulting selectors as JSON.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from attributify_cli.verbs import extract, options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="attributify",
        description="Extract attribute selectors from source files",
    )
    parser.add_argument(
        "--project-path", "-p",
        default=".",
        help="Project root path (default: current directory)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="verb", required=True)

    extract.register(sub)
    options.register(sub)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(levelname)s: %(message)s",
            stream=sys.stderr,
        )

    project_path = str(Path(args.project_path).resolve())

    # Dispatch to verb handler
    handler = args.handler
    return handler(args, project_path) or 0


if __name__ == "__main__":
    sys.exit(main())
