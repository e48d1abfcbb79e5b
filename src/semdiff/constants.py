#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for semdiff.

This module centralizes hardcoded values and default configuration constants
used across the semdiff library.

Constants are organized by category:
1. Diff Engine Defaults - Tolerances, bounds and path rendering
2. Format-Specific Constants - Parser conventions for each supported format
3. Dependencies - Optional package requirements per format
"""

from __future__ import annotations

# =============================================================================
# Diff Engine Defaults
# =============================================================================

# Exact numeric comparison when no tolerance is configured
DEFAULT_EPSILON: float | None = None

# Maximum nesting depth walked by the diff engine before DepthExceededError.
# Kept well below the interpreter recursion limit since every level of the
# traversal holds a generator frame.
DEFAULT_MAX_DEPTH = 256

# Stack frames held per nesting level by the traversal, and frames left over
# for callers, used to derive the highest max_depth the interpreter can walk
FRAMES_PER_DEPTH_LEVEL = 3
DEPTH_STACK_RESERVE = 150

# Path rendering
PATH_KEY_SEPARATOR = "."
ROOT_PATH_DISPLAY = "(root)"

# Alternate names accepted for output formats
OUTPUT_FORMAT_ALIASES = {
    "diffx": "native",
    "text": "native",
    "yml": "yaml",
}

# =============================================================================
# Format-Specific Constants
# =============================================================================

# JSON
DEFAULT_JSON_INDENT = 2

# INI
DEFAULT_INI_SECTION_NAME = "default"
DEFAULT_INI_PRESERVE_CASE = True
DEFAULT_INI_ALLOW_NO_VALUE = False
DEFAULT_INI_INFER_TYPES = False

# XML
XML_ATTRIBUTE_PREFIX = "@"
XML_TEXT_KEY = "#text"

# CSV
DEFAULT_CSV_DELIMITER = ","
DEFAULT_CSV_INFER_NUMBERS = False
DEFAULT_CSV_DETECT_DIALECT = False
CSV_SNIFF_DELIMITERS = ",\t;|"
CSV_SNIFF_SAMPLE_SIZE = 4096

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_YAML = [("pyyaml", "yaml", ">=6.0")]
DEPS_XML = [("defusedxml", "defusedxml", "")]
