import pytest

from kumihan.document import Document, Section
from kumihan.style import Style, TextAlignment
from kumihan.typesetting_engine import TextBlock, TextLine, TypesettingEngine


@pytest.fixture
def engine():
    return TypesettingEngine()


@pytest.fixture
def style():
    return Style(font_size=10.0, line_height=1.5)


def test_character_width_full_and_half(engine, style):
    assert engine.character_width("あ", style, True) == style.font_size
    assert engine.character_width("a", style, True) == style.font_size * 0.5


def test_character_height_is_font_size(engine, style):
    assert engine.character_height("あ", style, False) == style.font_size


def test_text_width_includes_character_spacing(engine, style):
    plain = engine.text_width("ab", style, False)
    spaced_style = Style(font_size=10.0, character_spacing=0.1)
    spaced = engine.text_width("ab", spaced_style, False)
    assert spaced == pytest.approx(plain + 0.1 * 10.0)


def test_text_width_single_char_has_no_spacing(engine):
    spaced_style = Style(font_size=10.0, character_spacing=0.5)
    assert engine.text_width("あ", spaced_style, False) == engine.character_width(
        "あ", spaced_style, False
    )


def test_break_lines_preserves_text_and_respects_width(engine, style):
    text = "あいうえおかきくけこさしすせそ"
    lines = engine.break_lines(text, style, 35.0, True)
    assert "".join(line.text for line in lines) == text
    assert all(line.width <= 35.0 for line in lines)
    assert len(lines) > 1


def test_break_lines_newline_marks_line_break(engine, style):
    lines = engine.break_lines("あ\nい", style, 100.0, True)
    assert [line.text for line in lines] == ["あ", "い"]
    assert lines[0].has_line_break
    assert not lines[1].has_line_break


def test_break_lines_sets_height_and_baseline(engine, style):
    lines = engine.break_lines("あいうえお", style, 20.0, True)
    for line in lines:
        assert line.height == pytest.approx(style.font_size * style.line_height)
        assert line.baseline == pytest.approx(style.font_size * 0.8)


def test_break_lines_oversized_char_still_placed(engine, style):
    lines = engine.break_lines("あい", style, 5.0, True)
    assert [line.text for line in lines] == ["あ", "い"]


def test_typeset_empty_text(engine, style):
    block = engine.typeset("", style, 100.0, True)
    assert block.lines == []
    assert block.height == 0.0
    assert block.width == 100.0


def test_typeset_line_start_prohibition(engine, style):
    left = Style(font_size=10.0, text_alignment=TextAlignment.LEFT)
    block = engine.typeset("あいう、えお", left, 30.0, True)
    assert "".join(line.text for line in block.lines) == "あいう、えお"
    for line in block.lines[1:]:
        assert not engine.rules.is_line_start_prohibited(line.text[0])
    assert block.lines[0].text == "あいう、"


def test_typeset_line_end_prohibition(engine):
    left = Style(font_size=10.0, text_alignment=TextAlignment.LEFT)
    block = engine.typeset("あい「うえ", left, 30.0, True)
    assert "".join(line.text for line in block.lines) == "あい「うえ"
    assert not block.lines[0].text.endswith("「")
    assert block.lines[1].text.startswith("「")


def test_typeset_hanging_reduces_width(engine):
    left = Style(font_size=10.0, text_alignment=TextAlignment.LEFT)
    raw = engine.break_lines("あ。", left, 100.0, True)
    block = engine.typeset("あ。", left, 100.0, True)
    half = engine.character_width("。", left, True) * 0.5
    assert block.lines[0].width == pytest.approx(raw[0].width - half)


def test_typeset_justify_stretches_short_line(engine, style):
    block = engine.typeset("あい", style, 100.0, True)
    assert block.lines[0].width == 100.0


def test_typeset_left_does_not_stretch(engine):
    left = Style(font_size=10.0, text_alignment=TextAlignment.LEFT)
    raw = engine.break_lines("あい", left, 100.0, True)
    block = engine.typeset("あい", left, 100.0, True)
    assert block.lines[0].width == raw[0].width


def test_typeset_justify_skips_explicit_break(engine, style):
    raw = engine.break_lines("あい\nう", style, 100.0, True)
    block = engine.typeset("あい\nう", style, 100.0, True)
    assert block.lines[0].has_line_break
    assert block.lines[0].width == raw[0].width


def test_typeset_block_height_is_sum_of_lines(engine, style):
    block = engine.typeset("あいうえおかきくけこ", style, 30.0, True)
    assert block.height == pytest.approx(sum(line.height for line in block.lines))


def test_typeset_document_blocks(engine, style):
    doc = Document()
    doc.add_section(Section(title="題", content="本文です。"))
    doc.add_section(Section(content="二つ目"))
    blocks = engine.typeset_document(doc, style, 200.0)
    assert len(blocks) == 3
    assert blocks[0].lines[0].text == "題"
    assert blocks[0].lines[0].height == pytest.approx(
        style.font_size * 1.2 * style.line_height
    )
    assert blocks[1].lines[0].height == pytest.approx(
        style.font_size * style.line_height
    )
    assert "".join(line.text for line in blocks[2].lines) == "二つ目"


def test_typeset_document_does_not_modify_style(engine, style):
    doc = Document()
    doc.add_section(Section(title="題", content="本文"))
    engine.typeset_document(doc, style, 200.0)
    assert style.font_size == 10.0
    assert style.bold is False


def test_typeset_document_empty(engine, style):
    assert engine.typeset_document(Document(), style, 200.0) == []


def test_dataclass_defaults():
    line = TextLine()
    block = TextBlock()
    assert (line.text, line.width, line.has_line_break) == ("", 0.0, False)
    assert (block.lines, block.height) == ([], 0.0)