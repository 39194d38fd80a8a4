"""CLI entrypoints for compdocs commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from jinja2 import TemplateError

from .analyzers import ParseError
from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import configure_logging
from .models import GenerationResult
from .orchestrator import Orchestrator


def _add_output_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    # Subcommands repeat the flags with SUPPRESS so the top-level value survives.
    flag_default: object = argparse.SUPPRESS if suppress_default else False
    path_default: object = argparse.SUPPRESS if suppress_default else None
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=flag_default,
        help="Log every resolved export and written file.",
    )
    group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=flag_default,
        help="Only log warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        default=path_default,
        help="Also write a DEBUG log to this file.",
    )


def _add_project_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file to use instead of <path>/{CONFIG_FILENAME}.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compdocs",
        description="Regenerate component Markdown docs and their table of contents.",
    )
    _add_output_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Clear route folders, write component stubs and the table of contents.",
    )
    _add_output_options(generate_parser, suppress_default=True)
    _add_project_options(generate_parser)

    toc_parser = subparsers.add_parser(
        "toc",
        help="Print the table of contents without writing any files.",
    )
    _add_output_options(toc_parser, suppress_default=True)
    _add_project_options(toc_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for compdocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=Path(args.log_file) if args.log_file else None,
    )

    config_path = Path(args.config) if args.config else Path(args.path)
    try:
        orchestrator = Orchestrator(load_config(config_path))
        if args.command == "toc":
            result = orchestrator.build_toc()
        else:
            result = orchestrator.run()
    except (ConfigError, ParseError, TemplateError, OSError) as exc:
        parser.exit(
            1, f"compdocs {args.command} failed: {exc}\nRun with --verbose for more details.\n"
        )

    if args.command == "toc":
        sys.stdout.write(result.toc)
    else:
        print(_summary(result))


def _summary(result: GenerationResult) -> str:
    written = sum(len(route.written) for route in result.routes)
    return f"Wrote {written} component docs; table of contents at {_relativize(result.toc_path)}"


def _relativize(path: Path | None) -> str:
    if path is None:
        return "-"
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
