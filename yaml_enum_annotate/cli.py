"""
Echoes a file to the console and, for YAML files, shows the `x-enum-varnames`
name next to each `enum` value.
"""

from __future__ import annotations

import json
import logging

import click
from .config import ConfigError, build_config
from .constants import CONTENT_END_BANNER, CONTENT_START_BANNER
from .exceptions import FileTooLargeError
from .filesystem import check_file_size, is_yaml_file, resolve_filepath
from .renderer import render_annotated
from .scanner import ScanFileError, annotate, read_document

__all__ = ["cli"]

logger = logging.getLogger(__name__)


@click.command()
@click.version_option()
@click.option("--inline-color", help="Decoration color (#RRGGBB)")
@click.option("--separator", help="Text between a line and its varname")
@click.option("--max-file-size", type=int, help="Largest file size to echo, in bytes")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Echo the decorated file (text) or print the annotations (json)",
)
@click.option("--ansi/--no-ansi", default=None, help="Force or disable colored output")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    inline_color: str | None = None,
    separator: str | None = None,
    max_file_size: int | None = None,
    output_format: str = "text",
    ansi: bool | None = None,
    verbose: bool = False,
):
    """
    Print a file and annotate the `enum` items of YAML files.

    Args:
        filepath: Path to the file to open.
        inline_color: Override for the decoration color.
        separator: Override for the decoration separator.
        max_file_size: Override for the largest file size whose content is shown.
        output_format: `text` to echo the decorated file, `json` to print the
            annotations only.
        ansi: Force (`True`) or disable (`False`) ANSI colors; auto-detected
            when None.
        verbose: Log debug messages to stderr.

    Returns:
        None.

    Raises:
        click.BadParameter: If configuration values, including the size limit
            from the environment, are invalid.
        click.ClickException: If the file cannot be read or decoded.

    Examples:
        yaml-enum-annotate openapi.yaml --inline-color "#FF8800"
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    filepath = resolve_filepath(filepath)
    try:
        config = build_config(
            filepath.parent,
            inline_color=inline_color,
            separator=separator,
            max_file_size=max_file_size,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        size = check_file_size(filepath, config.max_file_size)
    except FileTooLargeError as error:
        logger.info("Skipping %s: %d bytes over limit of %d", filepath, error.size, error.limit)
        if output_format == "json":
            click.echo("[]")
        else:
            click.echo(f"Opened file: {filepath.name}")
            click.echo(f"<Content omitted: file too large ({error.size} bytes)>")
        return
    except OSError as error:
        raise click.ClickException(f"Error accessing {filepath}: {error}") from error

    try:
        content = read_document(filepath)
    except ScanFileError as error:
        raise click.ClickException(str(error)) from error

    yaml_file = is_yaml_file(filepath, config.extensions)
    annotations = annotate(content) if yaml_file else []
    logger.debug("Read %s (%d bytes, %d annotations)", filepath, size, len(annotations))

    if output_format == "json":
        payload = [{"line": line_index, "text": text} for line_index, text in annotations]
        click.echo(json.dumps(payload, ensure_ascii=False))
        return

    colorize = ansi is not False
    output = content
    if yaml_file:
        try:
            output = render_annotated(content, annotations, config, colorize=colorize)
        except Exception:
            # Decorations are best effort; the file is still shown.
            logger.warning("Could not add enum varname decorations to %s", filepath, exc_info=True)
            output = content

    click.echo(f"Opened file: {filepath.name}")
    click.echo(CONTENT_START_BANNER)
    click.echo(output, color=ansi)
    click.echo(CONTENT_END_BANNER)


if __name__ == "__main__":
    cli()
