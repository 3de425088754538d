import json

import pytest

from kumihan.ruby_plugin import PluginType, SampleRubyPlugin


@pytest.fixture
def plugin():
    return SampleRubyPlugin()


def test_basic_functionality(plugin):
    assert plugin.is_enabled() is False
    info = plugin.info()
    assert info.id == "jp.typesetting.sample.ruby"
    assert info.name == "サンプルルビプラグイン"
    assert info.type is PluginType.TYPESETTING_RULE
    assert plugin.enable() is True
    assert plugin.is_enabled() is True
    assert plugin.info().enabled is True
    assert plugin.disable() is True
    assert plugin.is_enabled() is False


def test_shutdown_disables(plugin):
    assert plugin.initialize() is True
    plugin.enable()
    plugin.shutdown()
    assert plugin.is_enabled() is False


def test_ruby_mapping(plugin):
    assert plugin.get_ruby("漢字") == "かんじ"
    assert plugin.get_ruby("日本語") == "にほんご"
    plugin.add_ruby_mapping("新規", "しんき")
    assert plugin.get_ruby("新規") == "しんき"
    assert plugin.remove_ruby_mapping("新規") is True
    assert plugin.get_ruby("新規") == ""
    assert plugin.remove_ruby_mapping("存在しない") is False
    mappings = plugin.all_ruby_mappings()
    assert len(mappings) > 0
    assert mappings["漢字"] == "かんじ"


def test_all_mappings_is_copy(plugin):
    mappings = plugin.all_ruby_mappings()
    mappings["漢字"] = "ちがう"
    assert plugin.get_ruby("漢字") == "かんじ"


def test_apply_ruby(plugin):
    plugin.enable()
    assert plugin.get_config("autoApply") is True
    assert plugin.get_config("rubyFormat") == "《》"
    text = "日本語の漢字について"
    assert plugin.apply_ruby(text) == "日本語《にほんご》の漢字《かんじ》について"
    plugin.set_config("rubyFormat", "()")
    assert plugin.apply_ruby(text) == "日本語(にほんご)の漢字(かんじ)について"
    plugin.set_config("autoApply", False)
    assert plugin.apply_ruby(text) == text
    plugin.disable()
    plugin.set_config("autoApply", True)
    assert plugin.apply_ruby(text) == text


def test_min_kanji_length(plugin):
    plugin.enable()
    plugin.set_config("minKanjiLength", 2)
    plugin.add_ruby_mapping("字", "じ")
    plugin.add_ruby_mapping("漢字", "かんじ")
    text = "漢字と字について"
    assert plugin.apply_ruby(text) == "漢字《かんじ》と字について"
    plugin.set_config("minKanjiLength", 1)
    assert plugin.apply_ruby(text) == "漢字《かんじ》と字《じ》について"


def test_get_config_unknown_key(plugin):
    assert plugin.get_config("missing") is None


def test_file_io(plugin, tmp_path):
    plugin.add_ruby_mapping("テスト", "てすと")
    plugin.add_ruby_mapping("ファイル", "ふぁいる")
    path = tmp_path / "ruby_mappings_test.json"
    plugin.save_ruby_mappings(path)

    other = SampleRubyPlugin()
    other.load_ruby_mappings(path)
    assert other.get_ruby("テスト") == "てすと"
    assert other.get_ruby("ファイル") == "ふぁいる"
    assert other.all_ruby_mappings() == plugin.all_ruby_mappings()


def test_saved_file_is_indented_json(plugin, tmp_path):
    path = tmp_path / "out.json"
    plugin.save_ruby_mappings(path)
    content = path.read_text(encoding="utf-8")
    assert '\n    "' in content
    assert json.loads(content)["組版"] == "くみはん"


def test_load_replaces_existing(plugin, tmp_path):
    path = tmp_path / "map.json"
    path.write_text(json.dumps({"字": "じ"}, ensure_ascii=False), encoding="utf-8")
    plugin.load_ruby_mappings(path)
    assert plugin.all_ruby_mappings() == {"字": "じ"}
    assert plugin.get_ruby("漢字") == ""


def test_load_missing_file(plugin, tmp_path):
    with pytest.raises(OSError):
        plugin.load_ruby_mappings(tmp_path / "absent.json")


def test_load_non_string_value(plugin, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"漢字": 5}', encoding="utf-8")
    with pytest.raises(ValueError):
        plugin.load_ruby_mappings(path)
    assert plugin.get_ruby("漢字") == "かんじ"


def test_load_invalid_json(plugin, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        plugin.load_ruby_mappings(path)