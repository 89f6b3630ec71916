"""
numeronym: grapheme-aware numeronym abbreviations.

Turns a word or phrase into its first character, the count of characters
in between, and its last character ("localization" -> "l10n"), counting
user-perceived characters rather than code points.
"""

__version__ = "0.1.0"

from .graphemes import split_graphemes, is_whitespace_cluster, normalize_graphemes
from .abbreviation import (
    generate_numeronym,
    abbreviate,
    NumeronymResult,
    MIN_ABBREVIATED_LENGTH,
)
