"""Switchable kinsoku rules with their own prohibited-character lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ProhibitionRule(Enum):
    LINE_START = 0
    LINE_END = 1
    HANGING = 2
    WORD_BREAK = 3


_DEFAULT_LINE_START = "、。，．？！）］｝」』】〕〉》"
_DEFAULT_LINE_END = "（［｛「『【〔〈《"


def _default_rules() -> dict[ProhibitionRule, bool]:
    return {rule: True for rule in ProhibitionRule}


@dataclass
class ProhibitionSettings:
    """Which prohibition rules are on, and the characters they apply to."""

    rules: dict[ProhibitionRule, bool] = field(default_factory=_default_rules)
    character_fitting: bool = True
    line_start_prohibited_characters: list[str] = field(default_factory=list)
    line_end_prohibited_characters: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        for char in _DEFAULT_LINE_START:
            self.add_line_start_prohibited_character(char)
        for char in _DEFAULT_LINE_END:
            self.add_line_end_prohibited_character(char)

    def set_prohibition_rule(self, rule: ProhibitionRule, enabled: bool) -> None:
        self.rules[rule] = enabled

    def is_prohibition_rule_enabled(self, rule: ProhibitionRule) -> bool:
        return self.rules.get(rule, False)

    def add_line_start_prohibited_character(self, char: str) -> None:
        """Append ``char`` unless it is already listed."""
        if char not in self.line_start_prohibited_characters:
            self.line_start_prohibited_characters.append(char)

    def add_line_end_prohibited_character(self, char: str) -> None:
        """Append ``char`` unless it is already listed."""
        if char not in self.line_end_prohibited_characters:
            self.line_end_prohibited_characters.append(char)