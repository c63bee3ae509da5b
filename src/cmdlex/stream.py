"""Character cursor over a single line of source text."""

from __future__ import annotations

from collections.abc import Callable


class LineStream:
    """Cursor over one line (without its newline).

    ``start`` marks the beginning of the token being scanned; ``pos`` is the
    next unread column. ``peek()`` and ``next()`` return ``""`` at end of line.
    """

    def __init__(self, line: str, pos: int = 0) -> None:
        self.string = line
        self.pos = pos
        self.start = pos

    def eol(self) -> bool:
        return self.pos >= len(self.string)

    def peek(self) -> str:
        if self.pos < len(self.string):
            return self.string[self.pos]
        return ""

    def next(self) -> str:
        if self.pos < len(self.string):
            ch = self.string[self.pos]
            self.pos += 1
            return ch
        return ""

    def eat(self, ch: str) -> bool:
        """Consume the next character if it equals ch."""
        if self.pos < len(self.string) and self.string[self.pos] == ch:
            self.pos += 1
            return True
        return False

    def eat_while(self, pred: Callable[[str], bool]) -> bool:
        """Consume characters while pred holds. Return True if any were consumed."""
        begin = self.pos
        while self.pos < len(self.string) and pred(self.string[self.pos]):
            self.pos += 1
        return self.pos > begin

    def eat_space(self) -> bool:
        return self.eat_while(str.isspace)

    def skip_to_end(self) -> None:
        self.pos = len(self.string)

    def back_up(self, n: int) -> None:
        self.pos -= n

    def current(self) -> str:
        """Text of the token scanned so far."""
        return self.string[self.start : self.pos]
