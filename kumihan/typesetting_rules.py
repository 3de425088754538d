"""Japanese line-breaking rules (kinsoku) in the spirit of JIS X 4051."""

from __future__ import annotations

import re
from os import PathLike

_DEFAULT_LINE_START_PROHIBITED = (
    # punctuation
    "、。，．・：；？！‥…\u2014\u2015"
    # closing brackets
    "）］｝」』】〕〉》〗〙〟"
    # middle dots
    "・：；"
    # iteration marks, small kana and other symbols
    "ゝゞーァィゥェォッャュョヮヵヶぁぃぅぇぉっゃゅょゎ々〻"
    "\u2010\u30a0\u2013\u301c?!‼⁇⁈⁉℃％‰‱°"
)
_DEFAULT_LINE_END_PROHIBITED = "（［｛「『【〔〈《〖〘〝"
_DEFAULT_INSEPARABLE = "$￥￡℃°"
_DEFAULT_HANGING = "、。，．）］｝」』】〕〉》"

_HEX_CODE = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)")

_SECTION_ORDER = ("LineStartProhibited", "LineEndProhibited", "Inseparable", "Hanging")


def _parse_code_point(hex_code: str) -> str:
    """Parse the leading hexadecimal number of ``hex_code`` into a character."""
    match = _HEX_CODE.match(hex_code)
    if match is None:
        raise ValueError(f"invalid code point: {hex_code!r}")
    return chr(int(match.group(1), 16))


class TypesettingRules:
    """Sets of characters governing where lines may start, end and hang."""

    def __init__(self) -> None:
        self.line_start_prohibited: set[str] = set()
        self.line_end_prohibited: set[str] = set()
        self.inseparable: set[str] = set()
        self.hanging: set[str] = set()
        self.set_default_jis_x4051_rules()

    def _sections(self) -> dict[str, set[str]]:
        return {
            "LineStartProhibited": self.line_start_prohibited,
            "LineEndProhibited": self.line_end_prohibited,
            "Inseparable": self.inseparable,
            "Hanging": self.hanging,
        }

    def add_line_start_prohibited_character(self, char: str) -> None:
        self.line_start_prohibited.add(char)

    def is_line_start_prohibited(self, char: str) -> bool:
        return char in self.line_start_prohibited

    def add_line_end_prohibited_character(self, char: str) -> None:
        self.line_end_prohibited.add(char)

    def is_line_end_prohibited(self, char: str) -> bool:
        return char in self.line_end_prohibited

    def add_inseparable_character(self, char: str) -> None:
        self.inseparable.add(char)

    def is_inseparable(self, char: str) -> bool:
        return char in self.inseparable

    def add_hanging_character(self, char: str) -> None:
        self.hanging.add(char)

    def is_hanging_character(self, char: str) -> bool:
        return char in self.hanging

    def set_default_jis_x4051_rules(self) -> None:
        """Add the default JIS X 4051 character sets to the current ones."""
        self.line_start_prohibited.update(_DEFAULT_LINE_START_PROHIBITED)
        self.line_end_prohibited.update(_DEFAULT_LINE_END_PROHIBITED)
        self.inseparable.update(_DEFAULT_INSEPARABLE)
        self.hanging.update(_DEFAULT_HANGING)

    def load_from_file(self, path: str | PathLike) -> None:
        """Add characters from an INI-like file of ``U+XXXX`` code lists.

        Unknown sections and tokens without the ``U+`` prefix are ignored;
        a malformed code point raises :class:`ValueError`.
        """
        sections = self._sections()
        current = ""
        with open(path, encoding="utf-8") as stream:
            for raw in stream:
                line = raw[:-1] if raw.endswith("\n") else raw
                if not line:
                    continue
                if line.startswith("[") and line.endswith("]"):
                    current = line[1:-1]
                    continue
                if not current:
                    continue
                for token in line.split(","):
                    if not token.startswith("U+"):
                        continue
                    char = _parse_code_point(token[2:])
                    target = sections.get(current)
                    if target is not None:
                        target.add(char)

    def save_to_file(self, path: str | PathLike) -> None:
        """Write every character set, sorted by code point."""
        sections = self._sections()
        blocks = [
            f"[{name}]\n" + ",".join(f"U+{ord(ch):X}" for ch in sorted(sections[name]))
            for name in _SECTION_ORDER
        ]
        with open(path, "w", encoding="utf-8") as stream:
            stream.write("\n\n".join(blocks) + "\n")