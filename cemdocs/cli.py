"""CLI entrypoints for cemdocs commands."""

from __future__ import annotations

import argparse
import locale
import sys
from pathlib import Path

from .config import ConfigError
from .logging import configure_logging, get_logger, report_fatal
from .manifest import ManifestError
from .orchestrator import Orchestrator
from .writer import WriteError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cemdocs",
        description="Generate Markdown reference docs from a custom elements manifest.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Write README files for every documented component.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    generate_parser.add_argument(
        "--manifest",
        default=None,
        help="Manifest file relative to the project root (defaults to custom-elements.json).",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render all documents without writing them.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for cemdocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")
    try:
        # Inventory tables sort with the user's collation rules.
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.debug("Falling back to the default collation locale")

    if args.command == "generate":
        dry_run = bool(getattr(args, "dry_run", False))
        try:
            orchestrator = Orchestrator.from_path(args.path, manifest=args.manifest, dry_run=dry_run)
            result = orchestrator.run()
        except (ConfigError, ManifestError, WriteError) as exc:
            report_fatal(exc, verbose=bool(args.verbose))
            parser.exit(1, "cemdocs generate failed. Run with --verbose for more details.\n")
        if dry_run:
            print("Documents (dry-run):")
            for path in result.documents:
                print(f"  {_relativize(path)}")
        else:
            print(f"Generated {len(result.documents)} document(s)")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
