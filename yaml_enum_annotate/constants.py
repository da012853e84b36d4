"""Constants used across the yaml-enum-annotate package."""

from __future__ import annotations

from .config import AnnotateConfig

DEFAULT_CONFIG = AnnotateConfig()

# YAML keys and item syntax
ENUM_KEY = "enum:"
VARNAMES_KEY = "x-enum-varnames:"
DASH_ITEM_PREFIX = "- "
QUOTE_CHARS = ('"', "'")

# Rendering defaults
DEFAULT_SEPARATOR = DEFAULT_CONFIG.separator
YAML_EXTENSIONS = tuple(DEFAULT_CONFIG.extensions)

# Console echo
CONTENT_START_BANNER = "==== Content start ===="
CONTENT_END_BANNER = "==== Content end ===="
