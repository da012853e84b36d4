"""
yaml-enum-annotate: show `x-enum-varnames` names next to YAML `enum` values.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    yaml-enum-annotate openapi.yaml

Library Usage:
    from pathlib import Path
    from yaml_enum_annotate import annotate, render_annotated

    content = Path("openapi.yaml").read_text()
    annotations = annotate(content)  # [(2, "Active"), (3, "Inactive"), ...]
    print(render_annotated(content, annotations, colorize=False))
"""

from .config import AnnotateConfig, ConfigError
from .exceptions import FileTooLargeError
from .models import Annotation, Block, Decoration, EnumMatch, Line, ListItem
from .renderer import build_decorations, format_decoration, render_annotated
from .scanner import ScanFileError, annotate, annotate_file, find_enum_matches, read_document

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "annotate",
    "annotate_file",
    "find_enum_matches",
    "read_document",
    # Rendering
    "build_decorations",
    "format_decoration",
    "render_annotated",
    # Data models
    "Annotation",
    "Block",
    "Decoration",
    "EnumMatch",
    "Line",
    "ListItem",
    # Configuration
    "AnnotateConfig",
    # Exceptions
    "ConfigError",
    "FileTooLargeError",
    "ScanFileError",
    # Version
    "__version__",
]
