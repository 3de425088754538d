"""Text style definitions and their simple key/value file format."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike

_PROPERTY_PREFIX = "Property-"
_NUMBER = re.compile(
    r"[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class TextAlignment(Enum):
    LEFT = "Left"
    CENTER = "Center"
    RIGHT = "Right"
    JUSTIFY = "Justify"


class LineBreakMode(Enum):
    NORMAL = "Normal"
    STRICT = "Strict"
    LOOSE = "Loose"


def _parse_number(value: str) -> float:
    """Parse the leading number of ``value`` the way strtod does."""
    match = _NUMBER.match(value.lstrip())
    if match is None:
        raise ValueError(f"not a number: {value!r}")
    return float(match.group(0))


def _format_number(value: float) -> str:
    return f"{value:g}"


_NUMERIC_KEYS = {
    "FontSize": "font_size",
    "LineHeight": "line_height",
    "CharacterSpacing": "character_spacing",
    "WordSpacing": "word_spacing",
    "ParagraphSpacingBefore": "paragraph_spacing_before",
    "ParagraphSpacingAfter": "paragraph_spacing_after",
    "FirstLineIndent": "first_line_indent",
}

_BOOL_KEYS = {"Bold": "bold", "Italic": "italic", "Underline": "underline"}


@dataclass
class Style:
    """Font, spacing and alignment settings for a run of text."""

    font_family: str = "Mincho"
    font_size: float = 10.5
    line_height: float = 1.5
    text_alignment: TextAlignment = TextAlignment.JUSTIFY
    line_break_mode: LineBreakMode = LineBreakMode.NORMAL
    character_spacing: float = 0.0
    word_spacing: float = 0.0
    paragraph_spacing_before: float = 0.0
    paragraph_spacing_after: float = 0.5
    first_line_indent: float = 1.0
    bold: bool = False
    italic: bool = False
    underline: bool = False
    properties: dict[str, str] = field(default_factory=dict)

    def set_property(self, key: str, value: str) -> None:
        self.properties[key] = value

    def get_property(self, key: str) -> str:
        """Return a custom property, or an empty string when it is unset."""
        return self.properties.get(key, "")

    def load_from_file(self, path: str | PathLike) -> None:
        """Read settings from a ``Key: value`` file; unknown keys are ignored."""
        with open(path, encoding="utf-8") as stream:
            for raw in stream:
                line = raw[:-1] if raw.endswith("\n") else raw
                key, sep, value = line.partition(":")
                if not sep:
                    continue
                self._apply(key, value.strip(" \t"))

    def _apply(self, key: str, value: str) -> None:
        if key == "FontFamily":
            self.font_family = value
        elif key in _NUMERIC_KEYS:
            setattr(self, _NUMERIC_KEYS[key], _parse_number(value))
        elif key == "TextAlignment":
            try:
                self.text_alignment = TextAlignment(value)
            except ValueError:
                pass
        elif key == "LineBreakMode":
            try:
                self.line_break_mode = LineBreakMode(value)
            except ValueError:
                pass
        elif key in _BOOL_KEYS:
            setattr(self, _BOOL_KEYS[key], value == "true")
        elif key.startswith(_PROPERTY_PREFIX):
            self.set_property(key[len(_PROPERTY_PREFIX):], value)

    def save_to_file(self, path: str | PathLike) -> None:
        """Write every setting in the format read by :meth:`load_from_file`."""
        lines = [
            f"FontFamily: {self.font_family}",
            f"FontSize: {_format_number(self.font_size)}",
            f"LineHeight: {_format_number(self.line_height)}",
            f"TextAlignment: {self.text_alignment.value}",
            f"LineBreakMode: {self.line_break_mode.value}",
            f"CharacterSpacing: {_format_number(self.character_spacing)}",
            f"WordSpacing: {_format_number(self.word_spacing)}",
            f"ParagraphSpacingBefore: {_format_number(self.paragraph_spacing_before)}",
            f"ParagraphSpacingAfter: {_format_number(self.paragraph_spacing_after)}",
            f"FirstLineIndent: {_format_number(self.first_line_indent)}",
        ]
        lines.extend(
            f"{key}: {'true' if getattr(self, attribute) else 'false'}"
            for key, attribute in _BOOL_KEYS.items()
        )
        lines.extend(
            f"{_PROPERTY_PREFIX}{key}: {value}"
            for key, value in sorted(self.properties.items())
        )
        with open(path, "w", encoding="utf-8") as stream:
            stream.write("".join(f"{line}\n" for line in lines))