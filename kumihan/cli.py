"""Command-line front end: parse options, typeset a document and write the result."""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from kumihan.document import Document
from kumihan.style import Style, _parse_number
from kumihan.typesetting_engine import TextBlock, TypesettingEngine
from kumihan.unicode import UnicodeHandler

VERSION = "0.1.0"
OUTPUT_FORMATS = ("pdf", "epub", "html")

_PROGRAM = "kumihan"
_PRODUCT_NAME = "Japanese Typesetting Software"
_OUTPUT_HEADER = "Japanese Typesetting Output\n===========================\n\n"

_HELP_COLUMN = 27
_HELP_OPTIONS = (
    ("-h, --help", "このヘルプメッセージを表示して終了"),
    ("-v, --version", "バージョン情報を表示して終了"),
    ("--verbose", "詳細な出力を表示"),
    ("-i, --input FILE", "入力ファイルを指定"),
    ("-o, --output FILE", "出力ファイルを指定"),
    ("-f, --format FORMAT", "出力フォーマットを指定 (pdf, epub, html)"),
    ("-s, --style FILE", "スタイルファイルを指定"),
    ("--horizontal", "横書きモードを使用"),
    ("--vertical", "縦書きモードを使用（デフォルト）"),
    ("--page-width WIDTH", "ページ幅をmmで指定（デフォルト: 210.0）"),
    ("--page-height HEIGHT", "ページ高さをmmで指定（デフォルト: 297.0）"),
    ("--margin-top SIZE", "上マージンをmmで指定（デフォルト: 20.0）"),
    ("--margin-bottom SIZE", "下マージンをmmで指定（デフォルト: 20.0）"),
    ("--margin-left SIZE", "左マージンをmmで指定（デフォルト: 20.0）"),
    ("--margin-right SIZE", "右マージンをmmで指定（デフォルト: 20.0）"),
    ("--font-family FAMILY", "フォントファミリーを指定（デフォルト: Mincho）"),
    ("--font-size SIZE", "フォントサイズをptで指定（デフォルト: 10.5）"),
    ("--line-height HEIGHT", "行の高さを倍率で指定（デフォルト: 1.5）"),
)
_HELP_EXAMPLES = (
    "input.txt output.pdf",
    "-f html --horizontal input.txt output.html",
    "--font-size 12 --line-height 1.8 input.txt",
)

# option -> (attribute, message shown when its value is missing)
_STRING_OPTIONS = {
    "-i": ("input_file", "入力ファイルが指定されていません"),
    "--input": ("input_file", "入力ファイルが指定されていません"),
    "-o": ("output_file", "出力ファイルが指定されていません"),
    "--output": ("output_file", "出力ファイルが指定されていません"),
    "-s": ("style_file", "スタイルファイルが指定されていません"),
    "--style": ("style_file", "スタイルファイルが指定されていません"),
    "--font-family": ("font_family", "フォントファミリーが指定されていません"),
}

_NUMBER_OPTIONS = {
    "--page-width": ("page_width", "ページ幅が指定されていません"),
    "--page-height": ("page_height", "ページ高さが指定されていません"),
    "--margin-top": ("margin_top", "上マージンが指定されていません"),
    "--margin-bottom": ("margin_bottom", "下マージンが指定されていません"),
    "--margin-left": ("margin_left", "左マージンが指定されていません"),
    "--margin-right": ("margin_right", "右マージンが指定されていません"),
    "--font-size": ("font_size", "フォントサイズが指定されていません"),
    "--line-height": ("line_height", "行の高さが指定されていません"),
}


@dataclass
class CommandLineOptions:
    """Settings collected from the command line."""

    input_file: str = ""
    output_file: str = ""
    output_format: str = "pdf"
    style_file: str = ""
    vertical: bool = True
    page_width: float = 210.0
    page_height: float = 297.0
    margin_top: float = 20.0
    margin_bottom: float = 20.0
    margin_left: float = 20.0
    margin_right: float = 20.0
    font_family: str = "Mincho"
    font_size: float = 10.5
    line_height: float = 1.5
    verbose: bool = False
    help: bool = False
    version: bool = False
    extra_options: dict[str, str] = field(default_factory=dict)


class CommandLineInterface:
    """Parses arguments and drives loading, typesetting and output."""

    def parse_command_line(self, argv: Sequence[str]) -> CommandLineOptions:
        """Parse ``argv`` (without the program name) into options.

        Problems with individual arguments are reported on stderr and parsing
        continues; a malformed number raises :class:`ValueError`.
        """
        options = CommandLineOptions()
        pending = list(argv)
        index = 0
        while index < len(pending):
            arg = pending[index]
            has_value = index + 1 < len(pending)

            if arg in ("-h", "--help"):
                options.help = True
            elif arg in ("-v", "--version"):
                options.version = True
            elif arg == "--verbose":
                options.verbose = True
            elif arg in _STRING_OPTIONS:
                attribute, missing = _STRING_OPTIONS[arg]
                if has_value:
                    index += 1
                    setattr(options, attribute, pending[index])
                else:
                    self.show_error(missing)
            elif arg in ("-f", "--format"):
                if has_value:
                    index += 1
                    options.output_format = pending[index]
                    if options.output_format not in OUTPUT_FORMATS:
                        self.show_error(f"無効な出力フォーマットです: {options.output_format}")
                        options.output_format = "pdf"
                else:
                    self.show_error("出力フォーマットが指定されていません")
            elif arg == "--horizontal":
                options.vertical = False
            elif arg == "--vertical":
                options.vertical = True
            elif arg in _NUMBER_OPTIONS:
                attribute, missing = _NUMBER_OPTIONS[arg]
                if has_value:
                    index += 1
                    setattr(options, attribute, _parse_number(pending[index]))
                else:
                    self.show_error(missing)
            elif arg.startswith("--"):
                key = arg[2:]
                if has_value and not pending[index + 1].startswith("-"):
                    index += 1
                    options.extra_options[key] = pending[index]
                else:
                    options.extra_options[key] = "true"
            elif not options.input_file:
                options.input_file = arg
            elif not options.output_file:
                options.output_file = arg
            else:
                self.show_error(f"無効な引数です: {arg}")
            index += 1
        return options

    def run(self, options: CommandLineOptions) -> int:
        """Carry out what ``options`` ask for and return the exit status."""
        if options.help:
            self.show_help()
            return 0
        if options.version:
            self.show_version()
            return 0

        if not options.input_file:
            self.show_error("入力ファイルが指定されていません")
            self.show_help()
            return 1

        options = dataclasses.replace(
            options, extra_options=dict(options.extra_options)
        )
        if not options.output_file:
            base, dot, _ = options.input_file.rpartition(".")
            if not dot:
                base = options.input_file
            if options.output_format in OUTPUT_FORMATS:
                options.output_file = f"{base}.{options.output_format}"

        try:
            if options.verbose:
                self.show_info(f"文書を読み込んでいます: {options.input_file}")
            document = self.load_document(options.input_file)

            if options.style_file:
                if options.verbose:
                    self.show_info(f"スタイルを読み込んでいます: {options.style_file}")
                style = self.load_style(options.style_file)
            else:
                style = Style(
                    font_family=options.font_family,
                    font_size=options.font_size,
                    line_height=options.line_height,
                )

            if options.verbose:
                self.show_info("文書を組版しています...")
            blocks = self.typeset_document(document, style, options)

            if options.verbose:
                self.show_info(f"結果を出力しています: {options.output_file}")
            try:
                self.output_result(blocks, options)
            except OSError:
                self.show_error("結果の出力に失敗しました")
                return 1

            if options.verbose:
                self.show_info("処理が完了しました")
            return 0
        except (OSError, ValueError, RuntimeError) as exc:
            self.show_error(f"エラーが発生しました: {exc}")
            return 1

    def show_help(self) -> None:
        """Print usage, the option table and a few examples to stdout."""
        lines = [f"使用法: {_PROGRAM} [オプション] 入力ファイル [出力ファイル]", "", "オプション:"]
        lines.extend(
            f"  {flags.ljust(_HELP_COLUMN)}{description}"
            for flags, description in _HELP_OPTIONS
        )
        lines.extend(["", "例:"])
        lines.extend(f"  {_PROGRAM} {example}" for example in _HELP_EXAMPLES)
        sys.stdout.write("\n".join(lines) + "\n")

    def show_version(self) -> None:
        """Print the product name and version to stdout."""
        sys.stdout.write(f"{_PRODUCT_NAME} バージョン {VERSION}\n")

    def load_document(self, path: str) -> Document:
        """Read a document file; raise :class:`RuntimeError` if it cannot be read."""
        document = Document()
        try:
            document.load_from_file(path)
        except OSError as exc:
            raise RuntimeError(f"文書の読み込みに失敗しました: {path}") from exc
        return document

    def load_style(self, path: str) -> Style:
        """Read a style file; raise :class:`RuntimeError` if it cannot be read."""
        style = Style()
        try:
            style.load_from_file(path)
        except OSError as exc:
            raise RuntimeError(f"スタイルの読み込みに失敗しました: {path}") from exc
        return style

    def typeset_document(
        self, document: Document, style: Style, options: CommandLineOptions
    ) -> list[TextBlock]:
        """Typeset ``document`` into the page width left between the side margins."""
        content_width = options.page_width - options.margin_left - options.margin_right
        return TypesettingEngine().typeset_document(document, style, content_width)

    def output_result(
        self, blocks: Sequence[TextBlock], options: CommandLineOptions
    ) -> None:
        """Write the laid-out lines as plain text to ``options.output_file``."""
        handler = UnicodeHandler()
        parts = [_OUTPUT_HEADER]
        for block in blocks:
            parts.extend(f"{line.text}\n" for line in block.lines)
            parts.append("\n")
        with open(options.output_file, "wb") as stream:
            stream.write(handler.encode_utf8("".join(parts)))

    def show_error(self, message: str) -> None:
        print(f"エラー: {message}", file=sys.stderr)

    def show_info(self, message: str) -> None:
        print(f"情報: {message}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line with ``argv`` (defaults to the process arguments)."""
    try:
        cli = CommandLineInterface()
        options = cli.parse_command_line(sys.argv[1:] if argv is None else argv)
        return cli.run(options)
    except Exception as exc:  # noqa: BLE001 - last-resort report for the command
        print(f"致命的なエラーが発生しました: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())