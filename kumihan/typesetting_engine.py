"""Greedy line breaking with kinsoku, justification and hanging punctuation."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from kumihan.document import Document
from kumihan.style import Style, TextAlignment
from kumihan.typesetting_rules import TypesettingRules
from kumihan.unicode import UnicodeHandler

_BASELINE_RATIO = 0.8
_TITLE_SCALE = 1.2
_JUSTIFY_THRESHOLD = 0.95
_HANGING_RATIO = 0.5


@dataclass
class TextLine:
    """One laid-out line of text and its measurements."""

    text: str = ""
    width: float = 0.0
    height: float = 0.0
    baseline: float = 0.0
    has_line_break: bool = False


@dataclass
class TextBlock:
    """A run of laid-out lines with the block's overall size."""

    lines: list[TextLine] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0


class TypesettingEngine:
    """Lays out Japanese text into lines following JIS X 4051 style rules."""

    def __init__(
        self,
        rules: TypesettingRules | None = None,
        unicode_handler: UnicodeHandler | None = None,
    ) -> None:
        self.rules = rules if rules is not None else TypesettingRules()
        self.unicode_handler = (
            unicode_handler if unicode_handler is not None else UnicodeHandler()
        )

    def typeset(self, text: str, style: Style, width: float, vertical: bool) -> TextBlock:
        """Break ``text`` into lines and apply kinsoku, justification and hanging."""
        lines = self.break_lines(text, style, width, vertical)
        self._apply_prohibition_rules(lines, style, vertical)
        self._apply_justification(lines, style, width, vertical)
        self._apply_hanging(lines, style, vertical)
        return TextBlock(
            lines=lines,
            width=width,
            height=sum(line.height for line in lines),
        )

    def typeset_document(
        self, document: Document, style: Style, width: float
    ) -> list[TextBlock]:
        """Typeset each section: a title block (if titled) then a content block."""
        blocks: list[TextBlock] = []
        for section in document.sections:
            if section.title:
                title_style = dataclasses.replace(
                    style, bold=True, font_size=style.font_size * _TITLE_SCALE
                )
                blocks.append(
                    self.typeset(section.title, title_style, width, document.vertical)
                )
            blocks.append(
                self.typeset(section.content, style, width, document.vertical)
            )
        return blocks

    def break_lines(
        self, text: str, style: Style, max_width: float, vertical: bool
    ) -> list[TextLine]:
        """Fill lines greedily, breaking at newlines and when ``max_width`` is exceeded."""
        height = style.font_size * style.line_height
        baseline = style.font_size * _BASELINE_RATIO

        def new_line() -> TextLine:
            return TextLine(height=height, baseline=baseline)

        lines: list[TextLine] = []
        current = new_line()
        for ch in text:
            if ch == "\n":
                current.has_line_break = True
                lines.append(current)
                current = new_line()
                continue

            char_width = self.character_width(ch, style, vertical)
            if current.width + char_width > max_width and current.text:
                lines.append(current)
                current = new_line()

            current.text += ch
            current.width += char_width

        if current.text:
            lines.append(current)
        return lines

    def _apply_prohibition_rules(
        self, lines: list[TextLine], style: Style, vertical: bool
    ) -> None:
        for current, following in zip(lines, lines[1:]):
            if current.has_line_break or not following.text:
                continue

            if current.text:
                last = current.text[-1]
                if self.rules.is_line_end_prohibited(last):
                    last_width = self.character_width(last, style, vertical)
                    current.text = current.text[:-1]
                    current.width -= last_width
                    following.text = last + following.text
                    following.width += last_width

            if following.text:
                first = following.text[0]
                if self.rules.is_line_start_prohibited(first):
                    first_width = self.character_width(first, style, vertical)
                    following.text = following.text[1:]
                    following.width -= first_width
                    current.text += first
                    current.width += first_width

    def _apply_justification(
        self, lines: list[TextLine], style: Style, max_width: float, vertical: bool
    ) -> None:
        if style.text_alignment is not TextAlignment.JUSTIFY:
            return
        for line in lines:
            if line.has_line_break or line.width >= max_width * _JUSTIFY_THRESHOLD:
                continue
            if len(line.text) <= 1:
                continue
            # Extra inter-character spacing is applied when drawing.
            line.width = max_width

    def _apply_hanging(self, lines: list[TextLine], style: Style, vertical: bool) -> None:
        for line in lines:
            if not line.text:
                continue
            last = line.text[-1]
            if self.rules.is_hanging_character(last):
                line.width -= self.character_width(last, style, vertical) * _HANGING_RATIO

    def character_width(self, char: str, style: Style, vertical: bool) -> float:
        """Full-width and unknown characters take the font size; half-width take half."""
        base = style.font_size
        if self.unicode_handler.is_full_width_character(char):
            return base
        if self.unicode_handler.is_half_width_character(char):
            return base * 0.5
        return base

    def character_height(self, char: str, style: Style, vertical: bool) -> float:
        return style.font_size

    def text_width(self, text: str, style: Style, vertical: bool) -> float:
        """Sum of character widths plus character spacing between characters."""
        width = 0.0
        for ch in text:
            width += self.character_width(ch, style, vertical)
        if len(text) > 1:
            width += style.character_spacing * style.font_size * (len(text) - 1)
        return width