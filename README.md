# kumihan

A small Japanese typesetting toolkit in pure Python. It breaks text into
lines while honouring line-start and line-end prohibition rules (kinsoku,
after JIS X 4051), hangs trailing punctuation, marks short lines as
justified, parses ruby annotations such as `｜漢字《かんじ》`, and converts
characters between horizontal and vertical presentation forms.

## Installing

```
pip install .
```

Python 3.10 or later is required; there are no third-party dependencies.

## Command line

```
kumihan input.txt output.txt
kumihan -f html --horizontal input.txt output.html
kumihan --font-size 12 --line-height 1.8 input.txt
kumihan --help
```

The input is a UTF-8 document file: a header of `Key: value` lines
(`Title`, `Author`, `Vertical`, `Metadata-<name>`), a `---` line, then
sections each opened by a `---` line. Inside a section, a line beginning
with `#` sets the section title (the text after the `#`); every other line
is content.

The command typesets each section (its title, if any, in a bold style 1.2
times the font size, then its content) to the page width minus the left
and right margins, and writes the laid-out lines as plain UTF-8 text under
a short header, with a blank line after each block.

Options: `-i/--input`, `-o/--output`, `-f/--format` (`pdf`, `epub` or
`html`; anything else is reported and `pdf` is used), `-s/--style` (a style
file, see below), `--horizontal`, `--vertical`, `--page-width`,
`--page-height`, `--margin-top`, `--margin-bottom`, `--margin-left`,
`--margin-right` (in mm), `--font-family`, `--font-size` (pt),
`--line-height` (a multiple), `--verbose`, `-h/--help`, `-v/--version`.
The first two bare arguments are the input and output files. Any other
`--name` is kept as an extra option, taking the next argument as its value
unless that starts with `-`. When no output file is given, its name is the
input name with its extension replaced by the chosen format's.

The command exits with 0 on success and 1 when the input is missing or
cannot be read, or the output cannot be written.

## What it does not do

- The `-f` format only chooses the extension of the default output name;
  no PDF, EPUB or HTML is produced. The output is always plain text.
- The page height, top and bottom margins and `--horizontal`/`--vertical`
  are parsed but do not change the output; the writing direction comes from
  the document's `Vertical` header.
- There is no graphical editor or preview, and no plugin manager:
  `SampleRubyPlugin` is a stand-alone class.

## Library

```python
from kumihan.document import Document
from kumihan.style import Style
from kumihan.typesetting_engine import TypesettingEngine

document = Document()
document.load_from_file("input.txt")

engine = TypesettingEngine()
for block in engine.typeset_document(document, Style(), 170.0):
    for line in block.lines:
        print(line.text, line.width)
```

Modules:

- `kumihan.document` – `Document` and `Section` dataclasses with metadata,
  `load_from_file` and `save_to_file` (nested sections are not saved).
- `kumihan.style` – the `Style` dataclass, `TextAlignment` and
  `LineBreakMode` enums; `load_from_file`/`save_to_file` use `Key: value`
  lines such as `FontSize: 12`, `TextAlignment: Center`, `Bold: true` and
  `Property-<name>: value`.
- `kumihan.unicode` – `UnicodeHandler`: UTF-8 encoding and decoding,
  Japanese, full-width and half-width tests, punctuation and bracket tests,
  NFKC normalization.
- `kumihan.typesetting_rules` – `TypesettingRules`: sets of line-start
  prohibited, line-end prohibited, inseparable and hanging characters,
  read from and written to files of `[Section]` headers and `U+XXXX` lists.
- `kumihan.typesetting_engine` – `TypesettingEngine` with `TextLine` and
  `TextBlock`: greedy line filling, kinsoku adjustment, justification and
  hanging punctuation; `character_width` gives full- and unknown-width
  characters the font size and half-width characters half of it.
- `kumihan.line_break` – `LineBreaker` and `BreakPoint`: penalty-based
  optimal line breaking by dynamic programming.
- `kumihan.ruby` – `RubyProcessor.parse_ruby` returns `RubyText` entries
  (base, reading, start and end index) for `｜base《ruby》` and `《ruby》`.
- `kumihan.vertical_layout` – `VerticalLayoutProcessor`: converts brackets,
  dashes and ellipses to vertical forms and back, and gives a 90° rotation
  for Latin letters, digits and some symbols in vertical text.
- `kumihan.prohibition` – `ProhibitionRule` and `ProhibitionSettings`:
  switchable kinsoku rules with their own character lists.
- `kumihan.ruby_plugin` – `SampleRubyPlugin`: when enabled, inserts
  readings after known words (longest first) of at least `minKanjiLength`
  characters, in the brackets given by `rubyFormat`; mappings load from and
  save to a JSON object file.

## Tests

```
pip install .[test]
pytest
```