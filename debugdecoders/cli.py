"""CLI entrypoint for debug-decoders."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .config import ConfigError
from .extractor import ExtractorError, ManifestNotFoundError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="debug-decoders",
        description=(
            "Provide me with a path to your elm-package.json folder. I'll find all your decoders! "
            "Then just open the file I create in elm-reactor"
        ),
    )
    parser.add_argument(
        "-p",
        "--path",
        default=os.getcwd(),
        help="A path where your elm-package.json exists (defaults to current directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="File to write, relative to the project path (defaults to DebugDecoders.elm).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated module instead of writing it.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for debug-decoders."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()
    try:
        outcome = orchestrator.run(args.path, output=args.output, dry_run=bool(args.dry_run))
    except ManifestNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except ExtractorError as exc:
        status = exc.exit_code if exc.exit_code else 1
        parser.exit(status, f"Something went wrong while running the interface extractor: {exc}\n")
    except ConfigError as exc:
        parser.exit(1, f"debug-decoders failed: {exc}\n")

    if outcome.dry_run:
        print(outcome.source, end="")
        return
    print(f"Created {_relativize(outcome.path)}")
    print("Open it with elm-reactor!")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
