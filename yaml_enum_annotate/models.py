"""Data models for yaml-enum-annotate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


class Annotation(NamedTuple):
    """A label to show next to a source line.

    Attributes:
        line_index: Zero-based index of the enum item line.
        text: Variable name taken from the matching `x-enum-varnames` item.
    """

    line_index: int
    text: str


@dataclass(frozen=True)
class Line:
    """A single line of the scanned document.

    Attributes:
        index: Zero-based position of the line in the document.
        indent: Number of leading space or tab characters (tabs count as one).
        content: Line content with surrounding whitespace removed.
    """

    index: int
    indent: int
    content: str

    @property
    def is_blank(self) -> bool:
        return not self.content


@dataclass(frozen=True)
class ListItem:
    """A dash item (``- value``) found inside a block.

    Attributes:
        line_index: Zero-based index of the line holding the item.
        value: Extracted value, without comment suffix and wrapping quotes.
    """

    line_index: int
    value: str


@dataclass
class Block:
    """A key line and the dash items nested under it.

    Attributes:
        key: The parent key line (``enum:`` or ``x-enum-varnames:``).
        items: Dash items in document order.
        end: Index of the first line after the block; equals the line count
            when the block runs to the end of the document.
    """

    key: Line
    items: list[ListItem] = field(default_factory=list)
    end: int = 0


@dataclass
class EnumMatch:
    """An enum block and its sibling `x-enum-varnames` block, if any."""

    enum: Block
    varnames: Block | None = None

    def pairs(self) -> list[Annotation]:
        """Pair enum items with varnames by position.

        The shorter list wins; extra items on either side are dropped.
        """
        if self.varnames is None:
            return []
        return [
            Annotation(item.line_index, varname.value)
            for item, varname in zip(self.enum.items, self.varnames.items)
        ]


@dataclass(frozen=True)
class Decoration:
    """Inline text drawn after the end of a line.

    Attributes:
        line_index: Zero-based index of the decorated line.
        text: Rendered text, separator included.
        color: RGB color used to draw the text.
    """

    line_index: int
    text: str
    color: tuple[int, int, int]
