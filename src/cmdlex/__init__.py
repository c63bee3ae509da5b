"""Batch script highlighting and completion."""

from __future__ import annotations

__version__ = "0.1.0"


def highlight(source: str) -> str:
    """Tokenize batch source and render it as highlighted HTML."""
    from cmdlex.render import render_html

    return render_html(source)
