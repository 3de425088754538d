import pytest

from kumihan.document import Document, Section


def test_section_metadata_and_children():
    parent = Section("章")
    child = Section("節")
    parent.add_child_section(child)
    parent.add_child_section(None)
    assert parent.children == [child]
    parent.set_metadata("key", "value")
    assert parent.get_metadata("key") == "value"
    assert parent.get_metadata("missing") == ""


def test_document_defaults_and_sections():
    doc = Document()
    assert doc.vertical is True
    doc.add_section(Section("a"))
    doc.add_section(None)
    assert [s.title for s in doc.sections] == ["a"]
    assert doc.get_metadata("missing") == ""


def test_load_parses_header_and_sections(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text(
        "Title:  文書 \n"
        "Author: 著者\n"
        "Vertical: false\n"
        "Metadata-lang: ja\n"
        "ignored line\n"
        "---\n"
        "before any section\n"
        "---\n"
        "#見出し\n"
        "本文一\n"
        "本文二\n"
        "---\n"
        "#次\n"
        "続き\n",
        encoding="utf-8",
    )
    doc = Document()
    doc.load_from_file(path)
    assert doc.title == "文書"
    assert doc.author == "著者"
    assert doc.vertical is False
    assert doc.get_metadata("lang") == "ja"
    assert [s.title for s in doc.sections] == ["見出し", "次"]
    assert doc.sections[0].content == "本文一\n本文二\n"
    assert doc.sections[1].content == "続き\n"


def test_round_trip(tmp_path):
    doc = Document("題名", "作者", vertical=False)
    doc.set_metadata("b", "2")
    doc.set_metadata("a", "1")
    doc.add_section(Section("第1章", "一行目\n二行目\n"))
    doc.add_section(Section("第2章", "三行目\n"))
    path = tmp_path / "doc.txt"
    doc.save_to_file(path)

    loaded = Document()
    loaded.load_from_file(path)
    assert loaded.title == doc.title
    assert loaded.author == doc.author
    assert loaded.vertical == doc.vertical
    assert loaded.metadata == doc.metadata
    assert [s.content for s in loaded.sections] == [s.content for s in doc.sections]
    assert [s.title.lstrip() for s in loaded.sections] == ["第1章", "第2章"]


def test_saved_header_lines(tmp_path):
    doc = Document("題名", "作者")
    doc.set_metadata("z", "last")
    doc.set_metadata("a", "first")
    path = tmp_path / "doc.txt"
    doc.save_to_file(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[:6] == [
        "Title: 題名",
        "Author: 作者",
        "Vertical: true",
        "Metadata-a: first",
        "Metadata-z: last",
        "---",
    ]


def test_load_appends_to_existing_sections(tmp_path):
    path = tmp_path / "doc.txt"
    Document(sections=[Section("x", "y\n")]).save_to_file(path)
    doc = Document(sections=[Section("existing")])
    doc.load_from_file(path)
    assert len(doc.sections) == 2
    assert doc.sections[0].title == "existing"


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Document().load_from_file(tmp_path / "missing.txt")