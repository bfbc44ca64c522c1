"""
Shared constants for the verrange package.

This module centralizes limits, syntax characters and environment switches so
the parsers, value types and CLI agree on them.
"""

import os

# Numeric components are unsigned 64-bit integers
MAX_NUMERIC = 2**64 - 1

# Version syntax
SEPARATOR = "."
POSITIVE_SUFFIX = "+"
NEGATIVE_SUFFIX = "-"
SUFFIX_CHARS = (POSITIVE_SUFFIX, NEGATIVE_SUFFIX)

# Range syntax
WILDCARD = "*"
GREATER = ">"
LESS = "<"
EQUALS = "="
INTERVAL_SEPARATOR = ","
OPEN_INCLUSIVE = "["
OPEN_EXCLUSIVE = "("
CLOSE_INCLUSIVE = "]"
CLOSE_EXCLUSIVE = ")"

# Set to "1" to restrict letters and digits to ASCII when a parser is not
# given an explicit ascii_only argument
ASCII_ONLY_ENV = "VERRANGE_ASCII_ONLY"


def ascii_only_default() -> bool:
    """Return True if the environment asks for ASCII-only parsing."""
    return os.environ.get(ASCII_ONLY_ENV) == "1"
