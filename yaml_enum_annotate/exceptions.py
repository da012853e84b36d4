"""Package-specific exception types."""

from __future__ import annotations

from pathlib import Path


class FileTooLargeError(OSError):
    """Raised when a file exceeds the configured maximum size.

    Args:
        filepath: Path to the offending file.
        size: Actual file size in bytes.
        limit: Maximum allowed size in bytes.
    """

    def __init__(self, filepath: Path, size: int, limit: int):
        self.filepath = filepath
        self.size = size
        self.limit = limit
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"{self.filepath} exceeds the maximum allowed size of {self.limit} bytes."
