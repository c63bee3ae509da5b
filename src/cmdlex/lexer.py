"""Batch-script lexer — restartable, one styled token per call."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from cmdlex.stream import LineStream
from cmdlex.tokens import QUOTE_CHARS, StyleCategory, Token, is_digit, is_word_char
from cmdlex.words import lookup

# ----------------------------------------------------------------------
# Continuations
# ----------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Base:
    """Top-level scanning. An empty stack is always Base."""


@dataclass(frozen=True, slots=True)
class StringScan:
    """Quoted or bracketed region ending at ``closer``.

    ``opening`` is set on a nested string whose opening quote has not been
    consumed yet.
    """

    closer: str
    category: StyleCategory
    opening: bool = False

    @property
    def opener(self) -> str:
        return _OPENERS.get(self.closer, self.closer)


@dataclass(frozen=True, slots=True)
class VariableScan:
    """Variable expansion after ``%`` or ``$``."""


LexContinuation = Base | StringScan | VariableScan

BASE = Base()
VARIABLE = VariableScan()

_OPENERS = {")": "(", "}": "{"}

# Expansion opener -> (closer, category) of the region it starts
_EXPANSION_REGIONS: dict[str, tuple[str, StyleCategory]] = {
    "(": (")", StyleCategory.QUOTE),
    "{": ("}", StyleCategory.DEFINITION),
    '"': ('"', StyleCategory.STRING),
    "'": ("'", StyleCategory.STRING),
}


@dataclass(slots=True)
class LexState:
    """Continuation stack carried from line to line; top is the last element."""

    stack: list[LexContinuation] = field(default_factory=list)

    @property
    def top(self) -> LexContinuation:
        return self.stack[-1] if self.stack else BASE

    def copy(self) -> LexState:
        return LexState(list(self.stack))


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------


def next_token(stream: LineStream, state: LexState) -> Token:
    """Scan one token from stream, updating state in place.

    Consumes at least one character unless the stream is at end of line.
    """
    stream.start = stream.pos
    category = StyleCategory.NONE
    # A scanner that hands off to a new continuation may return zero-width
    while not stream.eol():
        category = _dispatch(stream, state)
        if stream.pos > stream.start:
            break
    return Token(category, stream.start, stream.pos, stream.current())


def tokenize_line(line: str, state: LexState) -> list[Token]:
    """Tokenize one line; the tokens cover it exactly. Mutates state."""
    stream = LineStream(line)
    tokens: list[Token] = []
    while not stream.eol():
        tokens.append(next_token(stream, state))
    return tokens


def split_lines(source: str) -> list[str]:
    """Split on LF, dropping a CR that precedes it."""
    return [line.removesuffix("\r") for line in source.split("\n")]


def tokenize(source: str, state: LexState | None = None) -> list[list[Token]]:
    """Tokenize a whole buffer, returning one token list per line."""
    if state is None:
        state = LexState()
    return [tokenize_line(line, state) for line in split_lines(source)]


def line_states(lines: Iterable[str], state: LexState | None = None) -> list[LexState]:
    """Return a snapshot of the state in effect at the start of each line."""
    if state is None:
        state = LexState()
    states: list[LexState] = []
    for line in lines:
        states.append(state.copy())
        tokenize_line(line, state)
    return states


def token_at(line: str, column: int, state: LexState | None = None) -> Token:
    """Return the token under column, lexing line from state (not mutated)."""
    state = state.copy() if state is not None else LexState()
    stream = LineStream(line)
    token = Token(StyleCategory.NONE, 0, 0, "")
    while stream.pos < column and not stream.eol():
        token = next_token(stream, state)
    return token


# ----------------------------------------------------------------------
# Scanners
# ----------------------------------------------------------------------


def _dispatch(stream: LineStream, state: LexState) -> StyleCategory:
    top = state.top
    if isinstance(top, StringScan):
        if top.opening:
            return _open_string(stream, state, top)
        return _scan_string(stream, state, top)
    if isinstance(top, VariableScan):
        return _scan_variable(stream, state)
    return _scan_base(stream, state)


def _is_name_char(ch: str) -> bool:
    return is_word_char(ch) or ch == "-"


def _scan_base(stream: LineStream, state: LexState) -> StyleCategory:
    if stream.eat_space():
        return StyleCategory.NONE

    ch = stream.next()

    if ch in QUOTE_CHARS:
        state.stack.append(StringScan(ch, StyleCategory.STRING))
        return _dispatch(stream, state)

    if ch == ":" and stream.eat(":"):
        stream.skip_to_end()
        return StyleCategory.COMMENT

    if ch == "%":
        state.stack.append(VARIABLE)
        return _dispatch(stream, state)

    if ch in "+=@":
        return StyleCategory.OPERATOR

    if ch == "-":
        stream.eat("-")
        stream.eat_while(is_word_char)
        return StyleCategory.ATTRIBUTE

    if is_digit(ch) or ch == ".":
        stream.eat_while(is_digit)
        if stream.eol() or not is_word_char(stream.peek()):
            return StyleCategory.NUMBER
        # Digits running into a word are part of an identifier

    stream.eat_while(_is_name_char)
    text = stream.current()
    if stream.peek() == "=" and any(is_word_char(c) for c in text):
        return StyleCategory.DEFINITION
    return lookup(text) or StyleCategory.NONE


def _scan_string(stream: LineStream, state: LexState, scan: StringScan) -> StyleCategory:
    escaped = False
    while (ch := stream.next()) != "":
        if ch == scan.closer and not escaped:
            state.stack.pop()
            break
        if ch == "$" and not escaped and scan.closer != "'" and stream.peek() != scan.closer:
            stream.back_up(1)
            state.stack.append(VARIABLE)
            break
        if not escaped and scan.opener != scan.closer and ch == scan.opener:
            scan = StringScan(scan.closer, scan.category)
            state.stack.append(scan)
            escaped = False
            continue
        if not escaped and ch in QUOTE_CHARS and scan.closer not in QUOTE_CHARS:
            stream.back_up(1)
            state.stack.append(StringScan(ch, StyleCategory.STRING, opening=True))
            break
        escaped = not escaped and ch == "\\"
    # End of line without the closer leaves the scan on the stack
    return scan.category


def _open_string(stream: LineStream, state: LexState, scan: StringScan) -> StyleCategory:
    state.stack[-1] = StringScan(scan.closer, scan.category)
    stream.next()
    return _dispatch(stream, state)


def _scan_variable(stream: LineStream, state: LexState) -> StyleCategory:
    if len(state.stack) > 1:
        stream.eat("$")

    ch = stream.next()
    if ch in _EXPANSION_REGIONS:
        closer, category = _EXPANSION_REGIONS[ch]
        state.stack[-1] = StringScan(closer, category)
        return _dispatch(stream, state)

    if ch and not is_digit(ch):
        stream.eat_while(is_word_char)
        # %NAME% closes with a second percent
        if is_word_char(ch) and stream.current().startswith("%"):
            stream.eat("%")

    state.stack.pop()
    return StyleCategory.DEFINITION
