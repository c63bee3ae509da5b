"""--debug token dump."""

from __future__ import annotations

import sys
from typing import TextIO

from cmdlex.tokens import Token


def dump_tokens(lines: list[list[Token]], *, file: TextIO = sys.stderr) -> None:
    """Print one ``line:start-end CATEGORY 'text'`` row per token to *file*."""
    for line_no, tokens in enumerate(lines, 1):
        for tok in tokens:
            file.write(f"{line_no}:{tok.start}-{tok.end} {tok.category.name} {tok.text!r}\n")
