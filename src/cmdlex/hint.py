"""Autocomplete candidates for the token under the cursor."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from itertools import chain
from typing import Protocol

from cmdlex.lexer import LexState, split_lines, token_at, tokenize_line
from cmdlex.tokens import Token
from cmdlex.words import ATOMS, COMMANDS, KEYWORDS

logger = logging.getLogger(__name__)

CUSTOM_COMMANDS_KEY = "customCommands"
SPECIAL_VARIABLES_KEY = "specialVariables"

# Stored special variables carry a two-character sigil (e.g. "%~") that is
# skipped when matching against the typed prefix.
SPECIAL_VARIABLE_SIGIL_LEN = 2


class KeyValueStore(Protocol):
    """Read-only string store holding persisted hint configuration."""

    def get(self, key: str) -> str | None: ...


class MemoryStore:
    """KeyValueStore backed by a plain mapping."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"MemoryStore({self._values!r})"


@dataclass(frozen=True, slots=True)
class Cursor:
    """Cursor position, 0-based line and column."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class HintRequest:
    """Buffer text and the cursor that triggered completion."""

    text: str
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class HintResponse:
    """Ordered candidates and the column range on ``line`` they replace."""

    candidates: tuple[str, ...]
    line: int
    replace_from: int
    replace_to: int


class WordSource(Protocol):
    """Generic buffer word completion for a cursor."""

    def __call__(self, request: HintRequest) -> Sequence[str]: ...


class HintProvider:
    """Merge vocabulary, stored names, and buffer words into one candidate list."""

    def __init__(self, store: KeyValueStore, word_source: WordSource | None = None) -> None:
        self._store = store
        self._word_source = word_source

    def hint(self, request: HintRequest) -> HintResponse | None:
        """Find the token under the cursor and complete it."""
        lines = split_lines(request.text)
        line_no = request.cursor.line
        if not 0 <= line_no < len(lines):
            return None

        state = LexState()
        for line in lines[:line_no]:
            tokenize_line(line, state)
        token = token_at(lines[line_no], request.cursor.column, state)
        return self.complete(token, request)

    def complete(self, token: Token, request: HintRequest) -> HintResponse | None:
        """Return candidates for token, or None when the token is empty."""
        if token.text == "":
            return None

        size = len(token.text)
        prefix = token.text.upper()
        hints: list[str] = []

        for word in chain(ATOMS, KEYWORDS, COMMANDS, self.custom_commands()):
            if word.upper()[:size] == prefix and word not in hints:
                hints.append(word)

        # Special variables live in their own namespace: no dedup against the above
        for name in self.special_variables():
            start = SPECIAL_VARIABLE_SIGIL_LEN
            if name.upper()[start : start + size] == prefix:
                hints.append(name)

        if self._word_source is not None:
            for word in self._word_source(request):
                if word not in hints:
                    hints.append(word)

        logger.debug("%d candidates for %r", len(hints), token.text)
        return HintResponse(
            candidates=tuple(hints),
            line=request.cursor.line,
            replace_from=token.start,
            replace_to=token.end,
        )

    def custom_commands(self) -> list[str]:
        """Stored command names; absent or malformed values yield []."""
        raw = self._store.get(CUSTOM_COMMANDS_KEY)
        if not raw:
            return []
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("ignoring %s: invalid JSON (%s)", CUSTOM_COMMANDS_KEY, exc)
            return []
        if not isinstance(value, list):
            logger.warning("ignoring %s: expected a JSON array", CUSTOM_COMMANDS_KEY)
            return []
        return [item for item in value if isinstance(item, str)]

    def special_variables(self) -> list[str]:
        """Stored special variable names; absent value yields []."""
        raw = self._store.get(SPECIAL_VARIABLES_KEY)
        if not raw:
            return []
        return raw.split(",")
