"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from cmdlex.lexer import LexState, tokenize_line
from cmdlex.tokens import StyleCategory, Token


@pytest.fixture
def lex():
    """Return a helper that tokenizes one line from a fresh state."""

    def _lex(line: str) -> list[Token]:
        return tokenize_line(line, LexState())

    return _lex


@pytest.fixture
def lex_lines():
    """Return a helper that tokenizes several lines, returning tokens and final state."""

    def _lex_lines(lines: list[str]) -> tuple[list[list[Token]], LexState]:
        state = LexState()
        return [tokenize_line(line, state) for line in lines], state

    return _lex_lines


def significant(tokens: list[Token]) -> list[Token]:
    """Drop whitespace-only tokens."""
    return [t for t in tokens if t.text.strip()]


def assert_categories(tokens: list[Token], expected: list[StyleCategory]) -> None:
    """Assert that the token categories match the expected list."""
    actual = [t.category for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_covers(line: str, tokens: list[Token]) -> None:
    """Assert that tokens tile the line with no gaps, overlaps, or empty tokens."""
    pos = 0
    for tok in tokens:
        assert tok.start == pos, f"gap or overlap at column {pos}: {tok}"
        assert tok.end > tok.start, f"zero-width token: {tok}"
        assert line[tok.start : tok.end] == tok.text
        pos = tok.end
    assert pos == len(line)
