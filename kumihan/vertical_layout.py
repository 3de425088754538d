"""Conversion of characters between horizontal and vertical presentation forms."""

from __future__ import annotations

from kumihan.unicode import UnicodeHandler

_HORIZONTAL_TO_VERTICAL = {
    "(": "\ufe35",
    ")": "\ufe36",
    "[": "\ufe47",
    "]": "\ufe48",
    "{": "\ufe37",
    "}": "\ufe38",
    "<": "\ufe3f",
    ">": "\ufe40",
    "\u00ab": "\ufe3d",
    "\u00bb": "\ufe3e",
    "\u2014": "\ufe31",
    "\uff0d": "\uff5c",
    "\u2026": "\ufe19",
}
_VERTICAL_TO_HORIZONTAL = {v: k for k, v in _HORIZONTAL_TO_VERTICAL.items()}

_TO_VERTICAL = str.maketrans(_HORIZONTAL_TO_VERTICAL)
_TO_HORIZONTAL = str.maketrans(_VERTICAL_TO_HORIZONTAL)

_ROTATED_SYMBOLS = frozenset("/\\|-_=+*")


class VerticalLayoutProcessor:
    """Maps text to and from vertical forms and decides glyph rotation."""

    def __init__(self, unicode_handler: UnicodeHandler | None = None) -> None:
        self.unicode_handler = unicode_handler or UnicodeHandler()

    def convert_to_vertical(self, text: str) -> str:
        """Replace characters that have vertical presentation forms."""
        return text.translate(_TO_VERTICAL)

    def convert_to_horizontal(self, text: str) -> str:
        """Replace vertical presentation forms with their horizontal originals."""
        return text.translate(_TO_HORIZONTAL)

    def character_rotation(self, char: str, vertical: bool) -> int:
        """Return the rotation in degrees for ``char`` in the given direction."""
        if not vertical:
            return 0
        if ("a" <= char <= "z") or ("A" <= char <= "Z") or ("0" <= char <= "9"):
            return 90
        if char in _ROTATED_SYMBOLS:
            return 90
        return 0