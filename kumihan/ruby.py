"""Parsing of ruby (furigana) annotations written as ``｜base《ruby》``."""

from __future__ import annotations

import re
from dataclasses import dataclass

RUBY_START_MARK = "｜"
RUBY_TEXT_MARK = "《"
RUBY_END_MARK = "》"

_START_TAG = re.compile(f"[{RUBY_START_MARK}{RUBY_TEXT_MARK}]")


@dataclass
class RubyText:
    """One annotation: its base text, its reading and its span in the source."""

    base: str
    ruby: str
    start: int
    end: int


class RubyProcessor:
    """Finds ruby annotations in marked-up text."""

    def parse_ruby(self, text: str) -> list[RubyText]:
        """Return every complete annotation in ``text``, in order.

        ``start`` is the index of the opening mark and ``end`` is one past
        the closing mark.
        """
        result: list[RubyText] = []
        pos = 0
        while pos < len(text):
            match = _START_TAG.search(text, pos)
            if match is None:
                break
            start = match.start()

            middle = text.find(RUBY_TEXT_MARK, start + 1)
            if middle < 0:
                pos = start + 1
                continue

            end = text.find(RUBY_END_MARK, middle + 1)
            if end < 0:
                pos = middle + 1
                continue

            result.append(
                RubyText(
                    base=text[start + 1:middle],
                    ruby=text[middle + 1:end],
                    start=start,
                    end=end + 1,
                )
            )
            pos = end + 1
        return result