"""HTML renderer — wraps styled tokens in class-named spans."""

from __future__ import annotations

from cmdlex.lexer import LexState, tokenize
from cmdlex.tokens import Token, style_class

CLASS_PREFIX = "cm-"


def render_html(source: str, state: LexState | None = None) -> str:
    """Render batch source as a highlighted ``<pre>`` block."""
    lines = [render_line(tokens) for tokens in tokenize(source, state)]
    return '<pre class="cm-s-default">' + "\n".join(lines) + "</pre>\n"


def render_line(tokens: list[Token]) -> str:
    parts: list[str] = []
    for tok in tokens:
        cls = style_class(tok.category)
        if cls is None:
            parts.append(_escape_html(tok.text))
        else:
            parts.append(f'<span class="{CLASS_PREFIX}{cls}">{_escape_html(tok.text)}</span>')
    return "".join(parts)


def _escape_html(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
