"""Command-line interface for cmdlex."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from io import StringIO
from pathlib import Path

from cmdlex.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    html: bool
    hint: tuple[int, int] | None
    config_file: Path | None
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="cmdlex",
        description="Batch script highlighter and completion helper",
    )
    p.add_argument("input", help="Input .bat/.cmd file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--html", action="store_true", help="Render highlighted HTML")
    mode.add_argument(
        "--hint",
        metavar="LINE:COL",
        help="Print completion candidates at a 1-based cursor position",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover cmdlex.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Verbose logging to stderr")
    return p


def parse_cursor_arg(s: str) -> tuple[int, int]:
    """Parse a 1-based LINE:COL string into 0-based (line, column)."""
    line, sep, col = s.partition(":")
    if not sep or not line.isdigit() or not col.isdigit():
        raise argparse.ArgumentTypeError(f"invalid cursor format (expected LINE:COL): {s}")
    if int(line) < 1 or int(col) < 1:
        raise argparse.ArgumentTypeError(f"cursor positions are 1-based: {s}")
    return int(line) - 1, int(col) - 1


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Turn parsed arguments into CliOptions."""
    return CliOptions(
        input_file=Path(args.input),
        output_file=Path(args.output) if args.output else None,
        html=args.html,
        hint=parse_cursor_arg(args.hint) if args.hint else None,
        config_file=Path(args.config) if args.config else None,
        debug=args.debug,
    )


def run(options: CliOptions, source: str) -> str:
    """Produce the requested output for source text."""
    from cmdlex.buffer import BufferWords
    from cmdlex.config import load_config, store_from_config
    from cmdlex.debug import dump_tokens
    from cmdlex.hint import Cursor, HintProvider, HintRequest
    from cmdlex.lexer import tokenize
    from cmdlex.render import render_html

    if options.hint is not None:
        input_dir = options.input_file.parent
        if not input_dir.parts:
            input_dir = Path(".")
        store = store_from_config(load_config(options.config_file, input_dir))
        provider = HintProvider(store, BufferWords())
        line, column = options.hint
        response = provider.hint(HintRequest(source, Cursor(line, column)))
        if response is None:
            return ""
        logger.debug(
            "replace line %d columns %d-%d",
            response.line + 1,
            response.replace_from + 1,
            response.replace_to + 1,
        )
        return "".join(f"{c}\n" for c in response.candidates)

    if options.html:
        return render_html(source)

    buf = StringIO()
    dump_tokens(tokenize(source), file=buf)
    return buf.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        source = options.input_file.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"error: cannot read {options.input_file}: {exc.strerror}", file=sys.stderr)
        return 1

    try:
        output = run(options, source)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        try:
            options.output_file.write_text(output, encoding="utf-8")
        except OSError as exc:
            print(f"error: cannot write {options.output_file}: {exc.strerror}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(output)

    return 0
