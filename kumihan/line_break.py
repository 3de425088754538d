"""Penalty-based optimal line breaking using dynamic programming."""

from __future__ import annotations

import math
from dataclasses import dataclass

from kumihan.style import Style
from kumihan.typesetting_rules import TypesettingRules
from kumihan.unicode import UnicodeHandler

_START_PENALTY = 1000.0
_SPACE_PENALTY = 50.0
_JAPANESE_PENALTY = 100.0
_SHORT_LINE_WEIGHT = 100.0


@dataclass
class BreakPoint:
    """A position where a line may (or must) be broken, with its cost."""

    position: int
    penalty: float
    mandatory: bool = False


class LineBreaker:
    """Chooses break positions that minimise short-line and break penalties."""

    def __init__(
        self,
        rules: TypesettingRules | None = None,
        unicode_handler: UnicodeHandler | None = None,
    ) -> None:
        self.rules = rules if rules is not None else TypesettingRules()
        self.unicode_handler = (
            unicode_handler if unicode_handler is not None else UnicodeHandler()
        )

    def break_lines(
        self, text: str, style: Style, max_width: float, vertical: bool
    ) -> list[str]:
        """Split ``text`` into lines at the optimal break positions."""
        break_points = self.find_break_points(text)
        breaks = self.calculate_optimal_breaks(
            text, break_points, style, max_width, vertical
        )
        lines: list[str] = []
        start = 0
        for pos in breaks:
            lines.append(text[start:pos])
            start = pos
        if start < len(text):
            lines.append(text[start:])
        return lines

    def find_break_points(self, text: str) -> list[BreakPoint]:
        """List candidate breaks: start, newlines, spaces, Japanese gaps, end."""
        points = [BreakPoint(0, _START_PENALTY, False)]
        is_japanese = self.unicode_handler.is_japanese_character
        for i, ch in enumerate(text):
            if ch == "\n":
                points.append(BreakPoint(i + 1, 0.0, True))
                continue
            if ch in (" ", "\t"):
                points.append(BreakPoint(i + 1, _SPACE_PENALTY, False))
                continue
            if i == 0:
                continue
            prev = text[i - 1]
            if not (is_japanese(prev) and is_japanese(ch)):
                continue
            if self.rules.is_line_start_prohibited(ch):
                continue
            if self.rules.is_line_end_prohibited(prev):
                continue
            if self.rules.is_inseparable(ch) or self.rules.is_inseparable(prev):
                continue
            points.append(BreakPoint(i, _JAPANESE_PENALTY, False))
        points.append(BreakPoint(len(text), 0.0, True))
        return points

    def calculate_optimal_breaks(
        self,
        text: str,
        break_points: list[BreakPoint],
        style: Style,
        max_width: float,
        vertical: bool,
    ) -> list[int]:
        """Return the interior break positions of the least-penalty layout."""
        if len(break_points) <= 1:
            return []

        widths = [self.character_width(ch, style, vertical) for ch in text]
        count = len(break_points)
        min_penalty = [math.inf] * count
        prev = [0] * count
        min_penalty[0] = 0.0

        for j in range(1, count):
            end_point = break_points[j]
            for i in range(j):
                start = break_points[i].position
                width = sum(widths[start:end_point.position], 0.0)

                if width > max_width and not end_point.mandatory:
                    continue

                line_penalty = 0.0
                if width < max_width:
                    ratio = width / max_width
                    line_penalty = _SHORT_LINE_WEIGHT * (1.0 - ratio) ** 2

                total = min_penalty[i] + line_penalty + end_point.penalty
                if total < min_penalty[j]:
                    min_penalty[j] = total
                    prev[j] = i

        breaks: list[int] = []
        j = count - 1
        while j > 0:
            j = prev[j]
            if j > 0:
                breaks.append(break_points[j].position)
        breaks.reverse()
        return breaks

    def character_width(self, char: str, style: Style, vertical: bool) -> float:
        """Full-width and unknown characters take the font size; half-width take half."""
        base = style.font_size
        if self.unicode_handler.is_full_width_character(char):
            return base
        if self.unicode_handler.is_half_width_character(char):
            return base * 0.5
        return base