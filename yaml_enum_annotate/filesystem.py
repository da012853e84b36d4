"""Filesystem helpers for yaml-enum-annotate."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .constants import YAML_EXTENSIONS
from .exceptions import FileTooLargeError


def resolve_filepath(raw_path: str) -> Path:
    """Expand ``~`` and return the absolute path.

    Existence and file type are checked by the CLI argument type.
    """
    return Path(raw_path).expanduser().resolve()


def is_yaml_file(filepath: Path, extensions: Iterable[str] = YAML_EXTENSIONS) -> bool:
    """Check whether `filepath` has one of the given suffixes, ignoring case.

    Examples:
        is_yaml_file(Path("openapi.YML"))  # True
        is_yaml_file(Path("notes.txt"))  # False
    """
    suffix = filepath.suffix.lower().lstrip(".")
    return bool(suffix) and suffix in {extension.lower() for extension in extensions}


def check_file_size(filepath: Path, max_size: int) -> int:
    """Return the size of `filepath` in bytes, refusing files over `max_size`.

    Raises:
        FileTooLargeError: If the file is larger than `max_size`.
        OSError: If the file cannot be stat'ed.

    Examples:
        check_file_size(Path("openapi.yaml"), 1_000_000)  # 2048
    """
    size = filepath.stat().st_size
    if size > max_size:
        raise FileTooLargeError(filepath, size, max_size)
    return size
