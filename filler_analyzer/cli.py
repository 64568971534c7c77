"""Command-line interface for the Filler Analyzer.

WHY: Speakers and coaches want to analyse a saved transcript from the
terminal without running the web app. The CLI wires together the full
pipeline (transcript loading, duration handling, the analysis engine,
pluggable report formatters, and file saving) behind a single command.

HOW: Uses argparse to accept an input transcript (file path or "-" for
stdin), a duration in minutes or seconds, report format selection, and
an output directory. Status messages go to stderr; reports are saved
next to the source (or to --output-dir), or printed with --stdout.

RULES:
- Positional argument: transcript file path, or "-" to read stdin
- --duration-seconds S is converted with max(0.1, S / 60); without a
  duration flag FILLER_DEFAULT_DURATION_MINUTES (1.0) is used
- --formats: comma-separated formatter keys (default: all registered)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-fillers-2.json)
- Status output goes to stderr (not stdout)
- Errors print "Error: ..." to stderr and exit with status 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from filler_analyzer import __version__
from filler_analyzer.config import (
    DEFAULT_DURATION_MINUTES,
    LOG_LEVEL,
    duration_minutes_from_seconds,
    parse_format_keys,
)
from filler_analyzer.core.analyzer import analyze
from filler_analyzer.formatters import FORMATTERS
from filler_analyzer.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"
STDIN_STEM = "transcript"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may analyse the same transcript several times while
    practicing. Overwriting the previous report would lose history.

    HOW: Check if {stem}{suffix} exists. If so, increment a counter
    and insert it before the file extension until a free name is found.

    RULES:
    - First attempt: {stem}{suffix} (e.g. talk-fillers.json)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. talk-fillers-2.json)
    - Counter starts at 2 and increments

    Args:
        stem: Source filename stem (without extension).
        suffix: Formatter's suffix (e.g. "-fillers.json").
        output_dir: Directory to save the output file.

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output as UTF-8 and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _read_transcript(input_file: str) -> str:
    """Read the transcript from a UTF-8 file or from stdin ("-")."""
    if input_file == STDIN_MARKER:
        return sys.stdin.read()
    return Path(input_file).read_text(encoding="utf-8")


def _resolve_duration(args: argparse.Namespace) -> float:
    if args.duration_seconds is not None:
        return duration_minutes_from_seconds(args.duration_seconds)
    if args.duration_minutes is not None:
        return args.duration_minutes
    return DEFAULT_DURATION_MINUTES


def run(args: argparse.Namespace) -> List[Path]:
    """Execute the analysis pipeline for parsed CLI arguments.

    HOW: Validates the input and output locations, reads the transcript,
    runs analyze(), then runs each selected formatter and either saves
    or prints its outputs.

    Returns:
        Paths of the saved report files (empty with --stdout).
    """
    from_stdin = args.input_file == STDIN_MARKER
    input_path: Optional[Path] = None
    if not from_stdin:
        input_path = Path(args.input_file).resolve()
        if not input_path.is_file():
            _fail("File not found: {}".format(input_path))

    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
    elif input_path is not None:
        output_dir = input_path.parent
    else:
        output_dir = Path.cwd()
    if not args.stdout and not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    try:
        if args.formats:
            format_keys = parse_format_keys(args.formats, FORMATTERS.keys())
        else:
            format_keys = list(FORMATTERS.keys())
        transcript = _read_transcript(args.input_file)
    except (ValueError, OSError) as e:
        _fail(str(e))

    duration = _resolve_duration(args)
    logger.debug("Formats: %s, duration: %s min", format_keys, duration)
    _status("Analyzing {} characters ({:.2f} min)...".format(len(transcript), duration))
    result = analyze(transcript, duration)
    _status("  {}".format(result.detection_summary))

    stem = input_path.stem if input_path is not None else STDIN_STEM
    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        for output in formatter.format(transcript, result):
            if args.stdout:
                sys.stdout.write(output.content)
            else:
                saved_path = _save_output(output, stem, output_dir)
                saved_files.append(saved_path)
                _status("  Saved: {}".format(saved_path.name))

    if saved_files:
        _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    return saved_files


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="filler-analyzer",
        description="Detect and categorize filler words in a speech transcript "
                    "and produce reports (JSON, plain text).",
    )

    parser.add_argument(
        "input_file",
        help="Path to a UTF-8 transcript file, or '-' to read from stdin.",
    )

    duration = parser.add_mutually_exclusive_group()
    duration.add_argument(
        "--duration-minutes",
        type=float,
        default=None,
        help="Spoken duration in minutes (default: {}).".format(DEFAULT_DURATION_MINUTES),
    )
    duration.add_argument(
        "--duration-seconds",
        type=float,
        default=None,
        help="Spoken duration in seconds; converted to max(0.1, seconds / 60) minutes.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of report formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save reports (default: next to the input file, "
             "or the current directory for stdin).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print reports to stdout instead of saving files.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    run(args)


if __name__ == "__main__":
    main()
