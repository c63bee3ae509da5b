"""Style categories, token data structure, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class StyleCategory(Enum):
    # Vocabulary (looked up in the word table)
    ATOM = auto()  # true false
    KEYWORD = auto()  # if for goto ...
    BUILTIN = auto()  # echo set copy ...

    # Punctuation and literals
    OPERATOR = auto()  # + = @
    ATTRIBUTE = auto()  # -flag --flag
    NUMBER = auto()  # 42

    # Assignment targets and variable expansions
    DEFINITION = auto()  # x in "set x=1", %FOO%, $x

    # Quoted regions
    STRING = auto()  # '...' "..."
    QUOTE = auto()  # %(...)

    COMMENT = auto()  # :: ...

    NONE = auto()  # no special styling


@dataclass(frozen=True, slots=True)
class Token:
    """A styled span of one line, 0-based columns, end exclusive."""

    category: StyleCategory
    start: int
    end: int
    text: str


# Renderer class names, one per styled category. NONE has no class.
STYLE_CLASSES: dict[StyleCategory, str] = {
    StyleCategory.ATOM: "atom",
    StyleCategory.KEYWORD: "keyword",
    StyleCategory.BUILTIN: "builtin",
    StyleCategory.OPERATOR: "operator",
    StyleCategory.ATTRIBUTE: "attribute",
    StyleCategory.NUMBER: "number",
    StyleCategory.DEFINITION: "def",
    StyleCategory.STRING: "string",
    StyleCategory.QUOTE: "quote",
    StyleCategory.COMMENT: "comment",
}


def style_class(category: StyleCategory) -> str | None:
    """Return the renderer class name for category, or None for unstyled text."""
    return STYLE_CLASSES.get(category)


# Host-facing constants
MODE_NAME = "cmd"
MIME_TYPES = ("text/x-sh", "application/x-sh")
LINE_COMMENT = "::"
CLOSE_BRACKETS = "()[]{}''\"\""

QUOTE_CHARS = "'\""


def is_word_char(ch: str) -> bool:
    """Return True if ch is an ASCII letter, digit, or underscore."""
    return ch.isascii() and (ch.isalnum() or ch == "_")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch != "" and ch in "0123456789"
