"""Inline decorations for annotated YAML lines."""

from __future__ import annotations

import re
from collections.abc import Iterable

import click

from .config import AnnotateConfig, normalize_config, parse_color, validate_config
from .constants import DEFAULT_SEPARATOR
from .models import Annotation, Decoration
from .scanner import split_lines

_LINE_ENDING = re.compile(r"\r\n|\r|\n")


def format_decoration(text: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Prefix an annotation with the visual separator.

    Examples:
        format_decoration("Active")  # " | Active"
    """
    return f"{separator}{text}"


def build_decorations(
    annotations: Iterable[Annotation],
    line_count: int,
    config: AnnotateConfig | None = None,
) -> list[Decoration]:
    """Turn annotations into decorations for a document of `line_count` lines.

    Annotations pointing outside the document are dropped, since the text may
    have changed after it was scanned. Only the first decoration on a line is
    kept, so applying the same annotations twice never stacks labels.

    Args:
        annotations: Annotations produced by the scanner.
        line_count: Number of lines in the document being decorated.
        config: Configuration supplying the separator and color. Defaults to a
            new `AnnotateConfig` when omitted.

    Returns:
        list[Decoration]: Decorations in the order of `annotations`.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        build_decorations([Annotation(2, "Active")], line_count=8)
    """
    config = normalize_config(config or AnnotateConfig())
    validate_config(config)
    color = parse_color(config.inline_color)

    decorations: list[Decoration] = []
    decorated_lines: set[int] = set()
    for line_index, text in annotations:
        if not 0 <= line_index < line_count:
            continue
        if line_index in decorated_lines:
            continue
        decorated_lines.add(line_index)
        decorations.append(
            Decoration(
                line_index=line_index,
                text=format_decoration(text, config.separator),
                color=color,
            )
        )
    return decorations


def decorate_lines(
    lines: list[str], decorations: Iterable[Decoration], colorize: bool = True
) -> list[str]:
    """Append decorations to the end of their lines.

    Args:
        lines: Document lines without line endings.
        decorations: Decorations to draw; out-of-range entries are ignored.
        colorize: Whether to wrap decoration text in ANSI color codes.

    Returns:
        list[str]: A new list of lines; `lines` is left untouched.
    """
    decorated = list(lines)
    for decoration in decorations:
        if not 0 <= decoration.line_index < len(decorated):
            continue
        text = decoration.text
        if colorize:
            text = click.style(text, fg=decoration.color, bold=True)
        decorated[decoration.line_index] += text
    return decorated


def render_annotated(
    text: str,
    annotations: Iterable[Annotation],
    config: AnnotateConfig | None = None,
    colorize: bool = True,
) -> str:
    """Render a document with its annotations shown at the end of lines.

    Original line endings are preserved.

    Args:
        text: Document content.
        annotations: Annotations for `text`.
        config: Configuration supplying the separator and color.
        colorize: Whether to emit ANSI color codes.

    Returns:
        str: The decorated document.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        render_annotated(content, annotate(content), colorize=False)
    """
    lines = split_lines(text)
    endings = _LINE_ENDING.findall(text)
    decorations = build_decorations(annotations, len(lines), config)
    decorated = decorate_lines(lines, decorations, colorize=colorize)

    parts: list[str] = []
    for index, line in enumerate(decorated):
        parts.append(line)
        if index < len(endings):
            parts.append(endings[index])
    return "".join(parts)
