"""Configuration loading and management."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
import tomllib

CONFIG_TABLE = "yaml-enum-annotate"
DOTFILE_NAME = ".yaml-enum-annotate.toml"
MAX_FILE_SIZE_ENV_VAR = "YAML_ENUM_ANNOTATE_MAX_FILE_SIZE"


@dataclass
class AnnotateConfig:
    """Configuration for echoing and decorating YAML files.

    Attributes:
        inline_color: Color of the inline decorations, as ``#RRGGBB``,
            ``0xRRGGBB`` or a decimal integer.
        separator: Text placed between the line content and the varname.
        extensions: File suffixes (without the dot) that receive decorations.
        max_file_size: Largest file size in bytes whose content is echoed.

    Examples:
        AnnotateConfig(inline_color="#FF0000", separator=" -> ")
    """

    # Decorations
    inline_color: str = "#00AA00"
    separator: str = " | "
    extensions: list[str] = field(default_factory=lambda: ["yml", "yaml"])

    # Echo
    max_file_size: int = 1_000_000


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`separator` must not be empty")
    """


def parse_color(value: object) -> tuple[int, int, int] | None:
    """Decode a color value into an RGB tuple.

    Accepts ``#RRGGBB``, ``0xRRGGBB`` (any case) and plain decimal integers,
    the forms understood by Java's ``Color.decode``.

    Args:
        value: Color text to decode.

    Returns:
        tuple[int, int, int] | None: Red, green and blue components, or None
            when `value` is not a valid color.

    Examples:
        parse_color("#00AA00")  # (0, 170, 0)
        parse_color("0xff0000")  # (255, 0, 0)
        parse_color("green")  # None
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        if text.startswith("#"):
            number = int(text[1:], 16)
        elif text[:2].lower() == "0x":
            number = int(text[2:], 16)
        else:
            number = int(text, 10)
    except ValueError:
        return None

    if not 0 <= number <= 0xFFFFFF:
        return None
    return (number >> 16) & 0xFF, (number >> 8) & 0xFF, number & 0xFF


def format_color(rgb: tuple[int, int, int]) -> str:
    """Render an RGB tuple as an uppercase ``#RRGGBB`` string.

    Examples:
        format_color((0, 170, 0))  # "#00AA00"
    """
    red, green, blue = rgb
    return f"#{red:02X}{green:02X}{blue:02X}"


def load_config(search_path: Path) -> AnnotateConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root. The
    first ``[tool.yaml-enum-annotate]`` table in a `pyproject.toml`, or
    ``[yaml-enum-annotate]`` / ``[tool.yaml-enum-annotate]`` table in a
    `.yaml-enum-annotate.toml`, wins. TOML files that cannot be read or decoded
    are skipped; defaults are returned when nothing is found.

    Raises:
        ConfigError: If the table is not a mapping or contains unsupported keys.

    Examples:
        load_config(Path("specs"))
    """
    current = search_path.resolve()
    candidates = (
        ("pyproject.toml", [("tool", CONFIG_TABLE)]),
        (DOTFILE_NAME, [(CONFIG_TABLE,), ("tool", CONFIG_TABLE)]),
    )

    while True:
        for filename, table_paths in candidates:
            config = _load_from_file(current / filename, table_paths)
            if config is not None:
                return config

        if current.parent == current:
            return AnnotateConfig()
        current = current.parent


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> AnnotateConfig | None:
    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        table: object = data
        for key in table_path:
            table = table.get(key) if isinstance(table, dict) else None
        if table is None:
            continue

        try:
            return AnnotateConfig(**table)
        except TypeError as error:
            table_display = ".".join(table_path)
            raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error

    return None


def max_file_size_from_env() -> int | None:
    """Read the size limit from `YAML_ENUM_ANNOTATE_MAX_FILE_SIZE`, if set.

    Raises:
        ConfigError: If the value is not a positive integer.
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return None

    try:
        max_size = int(env_value)
    except ValueError as error:
        raise ConfigError(
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        ) from error
    if max_size <= 0:
        raise ConfigError(f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {max_size}.")
    return max_size


def normalize_config(config: AnnotateConfig) -> AnnotateConfig:
    """Canonicalize the color to ``#RRGGBB`` and extensions to bare lowercase suffixes.

    Values that cannot be normalized are left alone for `validate_config` to
    reject.
    """
    changes: dict[str, object] = {}

    rgb = parse_color(config.inline_color)
    if rgb is not None:
        changes["inline_color"] = format_color(rgb)

    if isinstance(config.extensions, (list, tuple)):
        changes["extensions"] = [
            extension.strip().lstrip(".").lower() if isinstance(extension, str) else extension
            for extension in config.extensions
        ]

    return replace(config, **changes)


def validate_config(config: AnnotateConfig) -> None:
    """Validate an `AnnotateConfig` instance as given.

    Raises:
        ConfigError: If the color cannot be decoded, the separator or extension
            list is empty, or `max_file_size` is not a positive integer.

    Examples:
        validate_config(AnnotateConfig(inline_color="#FF8800"))
    """
    if parse_color(config.inline_color) is None:
        raise ConfigError(f"`inline_color` is not a valid color: {config.inline_color!r}")

    if not isinstance(config.separator, str) or not config.separator:
        raise ConfigError("`separator` must be a non-empty string")

    if not isinstance(config.extensions, (list, tuple)) or not config.extensions:
        raise ConfigError("`extensions` must be a non-empty list")
    if not all(isinstance(extension, str) and extension for extension in config.extensions):
        raise ConfigError("`extensions` entries must be non-empty strings")

    max_file_size = config.max_file_size
    if isinstance(max_file_size, bool) or not isinstance(max_file_size, int) or max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def build_config(search_path: Path, **overrides: object) -> AnnotateConfig:
    """Resolve the effective configuration.

    Precedence, lowest first: defaults, config file, the
    `YAML_ENUM_ANNOTATE_MAX_FILE_SIZE` environment variable, then `overrides`
    (None values are ignored).

    Raises:
        ConfigError: If a config file, the environment value or the result is
            invalid.

    Examples:
        config = build_config(Path.cwd(), inline_color="#FF0000")
    """
    config = load_config(search_path)

    env_max_file_size = max_file_size_from_env()
    if env_max_file_size is not None:
        config = replace(config, max_file_size=env_max_file_size)

    changes = {key: value for key, value in overrides.items() if value is not None}
    config = normalize_config(replace(config, **changes))
    validate_config(config)
    return config
