"""Word table — fixed batch vocabulary and its style categories."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from cmdlex.tokens import StyleCategory

ATOMS: tuple[str, ...] = ("true", "false")

KEYWORDS: tuple[str, ...] = tuple(
    "goto|call|exit|break|exist|defined|errorlevel|cmdextversion|if|else|for|"
    "EQU|NEQ|LSS|LEQ|GTR|GEQ".split("|")
)

COMMANDS: tuple[str, ...] = tuple(
    "assoc|bcdedit|cd|chcp|chdir|cls|color|copy|date|del|dir|echo|endlocal|"
    "erase|format|ftype|graftabl|md|mkdir|mklink|mode|more|move|path|pause|"
    "popd|prompt|pushd|rd|rem|ren|rename|rmdir|robocopy|set|setlocal|shift|"
    "start|time|title|tree|type|ver|verify|vol|wmic".split("|")
)


def _make_words() -> Mapping[str, StyleCategory]:
    words: dict[str, StyleCategory] = {}

    def d(category: StyleCategory, names: tuple[str, ...]) -> None:
        for name in names:
            words[name.lower()] = category

    d(StyleCategory.ATOM, ATOMS)
    d(StyleCategory.KEYWORD, KEYWORDS)
    d(StyleCategory.BUILTIN, COMMANDS)

    return MappingProxyType(words)


# Keys are lower-cased; cmd.exe treats commands and keywords case-insensitively.
WORDS: Mapping[str, StyleCategory] = _make_words()


def lookup(word: str) -> StyleCategory | None:
    """Return the category of a known word, ignoring case."""
    return WORDS.get(word.lower())
