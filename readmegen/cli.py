"""CLI entrypoint for readmegen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .logging import configure_logging
from .models import GenerationOutcome
from .orchestrator import DEFAULT_OUTPUT, FORMAT_JSON, GenerationOptions, Orchestrator
from .rendering import STYLES

_RULE = "─" * 60

_EPILOG = """\
examples:
  readmegen                                   generate README.md in the current directory
  readmegen --style minimal --output DOCS.md  minimal style, custom output
  readmegen --update                          regenerate, keeping custom sections
  readmegen --json --dry-run                  preview the analysis as JSON
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description=(
            "Scan a project directory and generate a README from its package.json, "
            "detected frameworks and src/ layout."
        ),
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        # "--dry" or "--d" are unknown flags, not prefixes of --dry-run or --dir
        allow_abbrev=False,
    )
    parser.add_argument(
        "--dir",
        dest="directory",
        nargs="?",
        const=".",
        default=".",
        help="Target directory (defaults to the current directory).",
    )
    parser.add_argument(
        "--style",
        nargs="?",
        default=None,
        metavar="{" + ",".join(STYLES) + "}",
        help="Output style (default: detailed). Unknown values fall back to the default.",
    )
    parser.add_argument(
        "--output",
        nargs="?",
        const=DEFAULT_OUTPUT,
        default=None,
        help=f"Output file path relative to the target directory (default: {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "--update",
        action="store_true",
        help="Preserve custom sections from the existing README.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write the project analysis as JSON instead of markdown.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview the output without writing to disk.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readmegen."""
    parser = _build_parser()
    # Unrecognised flags are ignored rather than rejected.
    args, _unknown = parser.parse_known_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    options = GenerationOptions(
        directory=args.directory,
        style=args.style,
        output=args.output,
        update=bool(args.update),
        json=bool(args.json),
        dry_run=bool(args.dry_run),
    )

    try:
        outcome = Orchestrator().run(options)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"Error: {exc}\n")
    except Exception as exc:  # pragma: no cover - defensive guard
        parser.exit(1, f"readmegen failed: {exc}\nRun with --verbose for more details.\n")

    if outcome.format == FORMAT_JSON:
        _report_json(outcome)
    else:
        _report_markdown(outcome)


def _report_json(outcome: GenerationOutcome) -> None:
    if outcome.dry_run:
        print(outcome.content)
    else:
        print(f"Done! JSON written to {_relativize(outcome.path)}")


def _report_markdown(outcome: GenerationOutcome) -> None:
    metadata = outcome.metadata
    print(f"Project:      {metadata.name} v{metadata.version}")
    if metadata.description:
        print(f"Description:  {metadata.description}")
    if metadata.frameworks:
        print(f"Frameworks:   {', '.join(metadata.frameworks)}")
    if metadata.languages:
        print(f"Languages:    {', '.join(metadata.languages)}")
    print(
        f"Dependencies: {len(metadata.dependencies)} prod, "
        f"{len(metadata.dev_dependencies)} dev"
    )
    print(f"Source files: {len(metadata.src_files)} in src/")
    print(f"Style:        {outcome.style}")
    if outcome.custom_sections:
        print(f"Preserved {outcome.custom_sections} custom section(s)")
    print("")

    if outcome.dry_run:
        print("DRY RUN - Preview:")
        print(_RULE)
        print(outcome.content)
        print(_RULE)
        print("No files written. Remove --dry-run to write.")
    else:
        line_count = len(outcome.content.split("\n"))
        byte_count = len(outcome.content.encode("utf-8"))
        print(f"Done! README written to {_relativize(outcome.path)}")
        print(f"  {line_count} lines, {byte_count} bytes")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
