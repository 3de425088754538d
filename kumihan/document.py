"""Document structure: sections, metadata and a plain-text file format."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

_SEPARATOR = "---"
_METADATA_PREFIX = "Metadata-"


@dataclass
class Section:
    """A titled block of text that may hold nested sections."""

    title: str = ""
    content: str = ""
    children: list[Section] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)

    def add_child_section(self, section: Section | None) -> None:
        if section is not None:
            self.children.append(section)

    def set_metadata(self, key: str, value: str) -> None:
        self.metadata[key] = value

    def get_metadata(self, key: str) -> str:
        return self.metadata.get(key, "")


@dataclass
class Document:
    """A titled document made of sections."""

    title: str = ""
    author: str = ""
    vertical: bool = True
    sections: list[Section] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)

    def add_section(self, section: Section | None) -> None:
        if section is not None:
            self.sections.append(section)

    def set_metadata(self, key: str, value: str) -> None:
        self.metadata[key] = value

    def get_metadata(self, key: str) -> str:
        return self.metadata.get(key, "")

    def load_from_file(self, path: str | PathLike) -> None:
        """Read a header block and ``---``-separated sections; sections are appended."""
        in_header = True
        current: Section | None = None
        content: list[str] = []

        with open(path, encoding="utf-8") as stream:
            for raw in stream:
                line = raw[:-1] if raw.endswith("\n") else raw
                if in_header:
                    if line == _SEPARATOR:
                        in_header = False
                    else:
                        self._apply_header(line)
                    continue

                if line == _SEPARATOR:
                    if current is not None:
                        current.content = "".join(content)
                        self.add_section(current)
                        content = []
                    current = Section()
                    continue

                if current is not None:
                    if line.startswith("#"):
                        current.title = line[1:]
                    else:
                        content.append(line + "\n")

        if current is not None:
            current.content = "".join(content)
            self.add_section(current)

    def _apply_header(self, line: str) -> None:
        key, sep, value = line.partition(":")
        if not sep:
            return
        value = value.strip(" \t")
        if key == "Title":
            self.title = value
        elif key == "Author":
            self.author = value
        elif key == "Vertical":
            self.vertical = value == "true"
        elif key.startswith(_METADATA_PREFIX):
            self.set_metadata(key[len(_METADATA_PREFIX):], value)

    def save_to_file(self, path: str | PathLike) -> None:
        """Write the document; nested sections are not written."""
        parts = [
            f"Title: {self.title}\n",
            f"Author: {self.author}\n",
            f"Vertical: {'true' if self.vertical else 'false'}\n",
        ]
        parts.extend(
            f"{_METADATA_PREFIX}{key}: {value}\n"
            for key, value in sorted(self.metadata.items())
        )
        parts.append(f"{_SEPARATOR}\n")
        for section in self.sections:
            parts.append(f"{_SEPARATOR}\n")
            parts.append(f"# {section.title}\n")
            parts.append(section.content)
        with open(path, "w", encoding="utf-8") as stream:
            stream.write("".join(parts))