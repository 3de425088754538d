"""Unicode helpers for Japanese text: encoding, character classes and normalization."""

from __future__ import annotations

import unicodedata

_REPLACEMENT = "\ufffd"

_JAPANESE_RANGES: tuple[tuple[int, int], ...] = (
    (0x3040, 0x309F),  # hiragana
    (0x30A0, 0x30FF),  # katakana
    (0x4E00, 0x9FFF),  # CJK unified ideographs
    (0xFF00, 0xFFEF),  # full-width ASCII and symbols
)

_PUNCTUATIONS = frozenset("、。，．？！")
_OPENING_BRACKETS = frozenset("（［｛「『【〔〈《")
_CLOSING_BRACKETS = frozenset("）］｝」』】〕〉》")


class UnicodeHandler:
    """Classifies characters and converts between UTF-8 bytes and text."""

    def __init__(self) -> None:
        self.japanese_ranges = _JAPANESE_RANGES
        self.punctuations = _PUNCTUATIONS
        self.opening_brackets = _OPENING_BRACKETS
        self.closing_brackets = _CLOSING_BRACKETS

    def decode_utf8(self, data: bytes | bytearray) -> str:
        """Decode UTF-8 bytes into code points; malformed input becomes U+FFFD."""
        return bytes(data).decode("utf-8", errors="replace")

    def encode_utf8(self, text: str) -> bytes:
        """Encode code points as UTF-8; lone surrogates become U+FFFD."""
        cleaned = "".join(
            _REPLACEMENT if 0xD800 <= ord(ch) <= 0xDFFF else ch for ch in text
        )
        return cleaned.encode("utf-8")

    def is_japanese_character(self, char: str) -> bool:
        code = ord(char)
        return any(low <= code <= high for low, high in self.japanese_ranges)

    def is_full_width_character(self, char: str) -> bool:
        return unicodedata.east_asian_width(char) in ("F", "W")

    def is_half_width_character(self, char: str) -> bool:
        return unicodedata.east_asian_width(char) in ("H", "Na")

    def is_punctuation(self, char: str) -> bool:
        return char in self.punctuations

    def is_opening_bracket(self, char: str) -> bool:
        return char in self.opening_brackets

    def is_closing_bracket(self, char: str) -> bool:
        return char in self.closing_brackets

    def normalize(self, text: str) -> str:
        """Return the NFKC normalization of ``text``."""
        return unicodedata.normalize("NFKC", text)