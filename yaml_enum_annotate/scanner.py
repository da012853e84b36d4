"""Line-oriented scanner pairing YAML `enum` items with `x-enum-varnames`."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .constants import DASH_ITEM_PREFIX, ENUM_KEY, QUOTE_CHARS, VARNAMES_KEY
from .models import Annotation, Block, EnumMatch, Line, ListItem

logger = logging.getLogger(__name__)

# Only CR, LF and CRLF break lines; str.splitlines() would also split on
# form feeds and Unicode separators and shift line indices.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split text into lines without their line endings.

    Args:
        text: Document content.

    Returns:
        list[str]: Lines in document order. An empty document yields a single
            empty line, and a trailing line break yields a trailing empty line.

    Examples:
        split_lines("a\\r\\nb\\n")  # ["a", "b", ""]
    """
    return _LINE_BREAK.split(text)


def measure_indent(line: str) -> int:
    """Count leading space and tab characters, one column each.

    Tabs are not expanded. Tab-indented YAML is unsupported and may pair
    blocks incorrectly.

    Examples:
        measure_indent("    - A")  # 4
        measure_indent("\\t- A")  # 1
    """
    count = 0
    for char in line:
        if char not in (" ", "\t"):
            break
        count += 1
    return count


def is_key_line(line: str, key: str) -> bool:
    """Check whether a line ends with `key` once whitespace is trimmed.

    No check is made that the line really is a mapping key, so a scalar value
    ending in the same literal also matches.

    Examples:
        is_key_line("  enum:  ", "enum:")  # True
        is_key_line("  enum: [A, B]", "enum:")  # False
    """
    return line.strip().endswith(key)


def parse_dash_item(line: str) -> str | None:
    """Extract the value of a ``- value`` sequence entry.

    Everything after the first ``#`` is treated as a comment, quoted or not.
    One layer of matching single or double quotes is then removed.

    Args:
        line: Raw line text.

    Returns:
        str | None: The extracted value, or None when the line is not a dash
            item.

    Examples:
        parse_dash_item("  - VALUE1 # comment")  # "VALUE1"
        parse_dash_item("  - 'Value1'")  # "Value1"
        parse_dash_item("  key: value")  # None
    """
    stripped = line.strip()
    if not stripped.startswith(DASH_ITEM_PREFIX):
        return None

    value = stripped[len(DASH_ITEM_PREFIX) :].strip()
    hash_index = value.find("#")
    if hash_index >= 0:
        value = value[:hash_index].strip()

    if value and value[0] in QUOTE_CHARS and value[-1] == value[0]:
        value = value[1:-1]
    return value


def _to_line(index: int, raw: str) -> Line:
    return Line(index=index, indent=measure_indent(raw), content=raw.strip())


def collect_block(lines: list[str], key_index: int) -> Block:
    """Collect the dash items nested under the key line at `key_index`.

    Blank lines are skipped. The block ends at the first non-blank line whose
    indentation is at or below the key's, or at the end of `lines`.
    """
    key = _to_line(key_index, lines[key_index])
    block = Block(key=key)

    position = key_index + 1
    while position < len(lines):
        line = _to_line(position, lines[position])
        if line.is_blank:
            position += 1
            continue
        if line.indent <= key.indent:
            break
        value = parse_dash_item(line.content)
        if value is not None:
            block.items.append(ListItem(line_index=position, value=value))
        position += 1

    block.end = position
    return block


def find_varnames_block(lines: list[str], start: int, indent: int) -> Block | None:
    """Search forward from `start` for a sibling `x-enum-varnames` block.

    The sibling must sit at exactly `indent`. Deeper lines are passed over;
    the search stops at the first non-blank line indented less than `indent`,
    which closes the enclosing mapping.
    """
    for position in range(start, len(lines)):
        line = _to_line(position, lines[position])
        if line.is_blank:
            continue
        if line.indent < indent:
            return None
        if line.indent == indent and is_key_line(line.content, VARNAMES_KEY):
            return collect_block(lines, position)
    return None


def find_enum_matches(text: str) -> list[EnumMatch]:
    """Locate every `enum` block and its `x-enum-varnames` sibling.

    Args:
        text: YAML document content.

    Returns:
        list[EnumMatch]: One entry per enum block, in document order. The
            `varnames` attribute is None when no sibling block was found.

    Examples:
        matches = find_enum_matches(Path("openapi.yaml").read_text())
    """
    lines = split_lines(text)
    matches: list[EnumMatch] = []

    index = 0
    while index < len(lines):
        if not is_key_line(lines[index], ENUM_KEY):
            index += 1
            continue

        enum_block = collect_block(lines, index)
        varnames_block = find_varnames_block(lines, enum_block.end, enum_block.key.indent)
        matches.append(EnumMatch(enum=enum_block, varnames=varnames_block))
        logger.debug(
            "enum block at line %d: %d items, varnames %s",
            index + 1,
            len(enum_block.items),
            "missing" if varnames_block is None else f"at line {varnames_block.key.index + 1}",
        )

        # The varnames block may be far below; resume right after the enum items.
        index = enum_block.end

    return matches


def annotate(text: str) -> list[Annotation]:
    """Map enum item lines to the variable names declared for them.

    Never raises: malformed input only yields fewer annotations.

    Args:
        text: YAML document content.

    Returns:
        list[Annotation]: ``(line_index, varname)`` pairs in document order.

    Examples:
        annotate("status:\\n  enum:\\n    - A\\n  x-enum-varnames:\\n    - Alpha\\n")
        # [Annotation(line_index=2, text="Alpha")]
    """
    annotations: list[Annotation] = []
    for match in find_enum_matches(text):
        annotations.extend(match.pairs())
    return annotations


class ScanFileError(Exception):
    """Raised when a YAML file cannot be read for scanning."""


def read_document(filepath: Path) -> str:
    """Read a UTF-8 file, keeping its line endings untranslated.

    Raises:
        ScanFileError: If the file cannot be opened or is not valid UTF-8.
    """
    try:
        with open(filepath, "r", encoding="UTF-8", newline="") as file:
            return file.read()
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise ScanFileError(error_message) from error
    except OSError as error:
        raise ScanFileError(f"Error accessing {filepath}: {error}") from error


def annotate_file(filepath: Path) -> tuple[str, list[Annotation]]:
    """Read a UTF-8 file and annotate its content.

    Returns:
        tuple[str, list[Annotation]]: The file content and its annotations.

    Raises:
        ScanFileError: If the file cannot be opened or is not valid UTF-8.

    Examples:
        content, annotations = annotate_file(Path("openapi.yaml"))
    """
    content = read_document(filepath)
    return content, annotate(content)
