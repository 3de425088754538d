"""A typesetting-rule plugin that adds ruby readings to known kanji words."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from typing import Any

logger = logging.getLogger(__name__)

_DEFAULT_RUBY_MAP = {
    "日本語": "にほんご",
    "漢字": "かんじ",
    "仮名": "かな",
    "組版": "くみはん",
    "禁則": "きんそく",
    "文字詰め": "もじづめ",
    "行分割": "ぎょうぶんかつ",
    "縦書き": "たてがき",
    "横書き": "よこがき",
}


class PluginType(Enum):
    INPUT_FILTER = "input_filter"
    OUTPUT_FILTER = "output_filter"
    TYPESETTING_RULE = "typesetting_rule"
    STYLE_EXTENSION = "style_extension"
    UI_EXTENSION = "ui_extension"
    COMMAND_EXTENSION = "command_extension"
    OTHER = "other"


@dataclass
class PluginInfo:
    """Descriptive information about a plugin."""

    id: str
    name: str
    version: str
    author: str
    description: str
    type: PluginType
    api_version: str
    dependencies: list[str] = field(default_factory=list)
    enabled: bool = False


def _default_config() -> dict[str, Any]:
    return {"autoApply": True, "rubyFormat": "《》", "minKanjiLength": 2}


class SampleRubyPlugin:
    """Annotates words from a kanji-to-reading table with ruby marks."""

    def __init__(self) -> None:
        self._enabled = False
        self._ruby_map: dict[str, str] = dict(_DEFAULT_RUBY_MAP)
        self._config: dict[str, Any] = _default_config()

    def info(self) -> PluginInfo:
        return PluginInfo(
            id="jp.typesetting.sample.ruby",
            name="サンプルルビプラグイン",
            version="1.0.0",
            author="日本語組版プロジェクト",
            description="特定の漢字に対して自動的にルビを振るサンプルプラグイン",
            type=PluginType.TYPESETTING_RULE,
            api_version="1.0",
            enabled=self._enabled,
        )

    def initialize(self) -> bool:
        logger.info("サンプルルビプラグインを初期化しています...")
        return True

    def shutdown(self) -> None:
        logger.info("サンプルルビプラグインを終了しています...")
        self._enabled = False

    def enable(self) -> bool:
        logger.info("サンプルルビプラグインを有効化しています...")
        self._enabled = True
        return True

    def disable(self) -> bool:
        logger.info("サンプルルビプラグインを無効化しています...")
        self._enabled = False
        return True

    def is_enabled(self) -> bool:
        return self._enabled

    def get_config(self, key: str) -> Any:
        """Return a setting, or ``None`` when it is unset."""
        return self._config.get(key)

    def set_config(self, key: str, value: Any) -> bool:
        self._config[key] = value
        return True

    def apply_ruby(self, text: str) -> str:
        """Insert readings after every known word of at least ``minKanjiLength`` characters.

        Text is returned unchanged when the plugin is disabled or ``autoApply``
        is off. Longer words take precedence over words they contain.
        """
        if not self._enabled or not self._config["autoApply"]:
            return text

        ruby_format = str(self._config["rubyFormat"])
        opening, closing = ruby_format[:1], ruby_format[1:2]
        min_length = int(self._config["minKanjiLength"])

        words = sorted(
            (word for word in self._ruby_map if word and len(word) >= min_length),
            key=lambda word: (-len(word), word),
        )
        if not words:
            return text
        pattern = re.compile("|".join(re.escape(word) for word in words))

        def annotate(match: re.Match[str]) -> str:
            word = match.group(0)
            return f"{word}{opening}{self._ruby_map[word]}{closing}"

        return pattern.sub(annotate, text)

    def add_ruby_mapping(self, kanji: str, ruby: str) -> None:
        self._ruby_map[kanji] = ruby

    def remove_ruby_mapping(self, kanji: str) -> bool:
        """Remove a mapping; return whether it existed."""
        return self._ruby_map.pop(kanji, None) is not None

    def get_ruby(self, kanji: str) -> str:
        """Return the reading of ``kanji``, or an empty string if unknown."""
        return self._ruby_map.get(kanji, "")

    def all_ruby_mappings(self) -> dict[str, str]:
        """Return a copy of every mapping, ordered by word."""
        return dict(sorted(self._ruby_map.items()))

    def load_ruby_mappings(self, path: str | PathLike) -> None:
        """Replace all mappings with those in a JSON object file.

        Raises :class:`OSError` if the file cannot be read and
        :class:`ValueError` if it is not an object of strings.
        """
        with open(path, encoding="utf-8") as stream:
            data = json.load(stream)
        if not isinstance(data, dict):
            raise ValueError("ruby mappings must be a JSON object")
        for kanji, ruby in data.items():
            if not isinstance(ruby, str):
                raise ValueError(f"reading for {kanji!r} is not a string")
        self._ruby_map = dict(data)

    def save_ruby_mappings(self, path: str | PathLike) -> None:
        """Write all mappings as a JSON object indented by four spaces."""
        with open(path, "w", encoding="utf-8") as stream:
            json.dump(self.all_ruby_mappings(), stream, ensure_ascii=False, indent=4)