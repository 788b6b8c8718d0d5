"""CLI entrypoints for ttupgrade commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import OUTPUT_CHOICES, ConfigError, load_config
from .logging import configure_logging, get_logger
from .migrator import Migrator

DATASHEET_BANNER = "--- docs/info.md ---"


def _shared_options() -> argparse.ArgumentParser:
    """Options every subcommand accepts, so ``-v`` works after the subcommand too."""
    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Increase log verbosity for troubleshooting.",
    )
    shared.add_argument(
        "path",
        nargs="?",
        default="info.yaml",
        help="Path to the v4 info.yaml (defaults to ./info.yaml, use - for stdin).",
    )
    return shared


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ttupgrade",
        description="Upgrade a Tiny Tapeout info.yaml from version 4 to version 6.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    shared = _shared_options()

    upgrade_parser = subparsers.add_parser(
        "upgrade",
        parents=[shared],
        help="Print the upgraded info.yaml and the docs/info.md datasheet.",
    )
    upgrade_parser.add_argument(
        "--only",
        choices=OUTPUT_CHOICES,
        default=None,
        help="Print only the upgraded info.yaml or only the markdown datasheet.",
    )

    subparsers.add_parser(
        "check",
        parents=[shared],
        help="Report whether the info.yaml can be upgraded without printing it.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for ttupgrade commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    from_stdin = args.path == "-"
    try:
        config = load_config(Path.cwd() if from_stdin else Path(args.path))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    configure_logging(
        verbose=bool(args.verbose) or config.verbose,
        log_file=config.log_file,
    )
    logger = get_logger("cli")

    try:
        text = sys.stdin.read() if from_stdin else Path(args.path).read_text(encoding="utf-8")
    except OSError as exc:
        parser.exit(1, f"Cannot read {args.path}: {exc}\n")
    logger.debug("Read %d characters from %s", len(text), "stdin" if from_stdin else args.path)

    outcome = Migrator().upgrade(text)
    if not outcome.ok:
        parser.exit(1, f"{outcome.error.rstrip()}\n")

    if args.command == "upgrade":
        _print_outcome(outcome.info_yaml, outcome.datasheet, args.only or config.only)
    elif args.command == "check":
        print(f"{_describe(args.path)} is ready to upgrade to version 6")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _print_outcome(info_yaml: str, datasheet: str, only: str | None) -> None:
    if only == "yaml":
        sys.stdout.write(info_yaml)
    elif only == "markdown":
        sys.stdout.write(datasheet)
    else:
        sys.stdout.write(info_yaml)
        sys.stdout.write(f"{DATASHEET_BANNER}\n")
        sys.stdout.write(datasheet)


def _describe(path: str) -> str:
    if path == "-":
        return "stdin"
    try:
        return str(Path(path).resolve().relative_to(Path.cwd()))
    except ValueError:
        return path


__all__ = ["main"]


if __name__ == "__main__":
    main(sys.argv[1:])
