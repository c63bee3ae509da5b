"""Buffer word source — completes from words already present in the document."""

from __future__ import annotations

import re

from cmdlex.hint import HintRequest
from cmdlex.lexer import split_lines

_WORD = re.compile(r"[\w$]+", re.ASCII)


class BufferWords:
    """Offer words near the cursor that extend the word fragment left of it.

    Lines within ``range_`` of the cursor are scanned, upward first and then
    downward, collecting distinct words in first-seen order. The fragment
    itself is not offered from the cursor line.
    """

    def __init__(self, range_: int = 500) -> None:
        self.range = range_

    def __call__(self, request: HintRequest) -> list[str]:
        lines = split_lines(request.text)
        line_no = request.cursor.line
        if not 0 <= line_no < len(lines):
            return []

        cur_line = lines[line_no]
        end = min(request.cursor.column, len(cur_line))
        start = end
        while start and _WORD.fullmatch(cur_line[start - 1]):
            start -= 1
        fragment = cur_line[start:end]

        words: list[str] = []
        seen: set[str] = set()
        last = len(lines) - 1
        for step in (-1, 1):
            stop = min(max(line_no + step * self.range, 0), last) + step
            for idx in range(line_no, stop, step):
                for m in _WORD.finditer(lines[idx]):
                    word = m.group()
                    if idx == line_no and word == fragment:
                        continue
                    if word.startswith(fragment) and word not in seen:
                        seen.add(word)
                        words.append(word)
        return words
