"""
Numeronym abbreviation.

A numeronym keeps the first and last character of a word and replaces
everything between them with the count of what was left out:

    localization         -> l10n
    accessibility        -> a11y
    Andreessen Horowitz  -> a16z

Counting happens on grapheme clusters after whitespace has been removed
everywhere (not just trimmed) and every cluster has been lowercased. Inputs
with two clusters or fewer have nothing to elide and come back as the
filtered, lowercased text.
"""

import logging
from dataclasses import dataclass, field

from .graphemes import normalize_graphemes

logger = logging.getLogger(__name__)

# Fewest clusters that leave at least one to elide.
MIN_ABBREVIATED_LENGTH = 3


@dataclass(frozen=True)
class NumeronymResult:
    """Numeronym together with the measurements it was built from."""
    text: str
    graphemes: tuple = field(default_factory=tuple)
    first: str = ""
    last: str = ""
    elided: int = 0

    @property
    def length(self) -> int:
        return len(self.graphemes)

    @property
    def abbreviated(self) -> bool:
        return self.length >= MIN_ABBREVIATED_LENGTH


def abbreviate(text: str) -> NumeronymResult:
    """Build the numeronym for text and report how it was derived.

    Args:
        text: Any string, including empty or whitespace-only

    Returns:
        NumeronymResult whose .text equals generate_numeronym(text)
    """
    graphemes = normalize_graphemes(text)
    n = len(graphemes)

    if n < MIN_ABBREVIATED_LENGTH:
        return NumeronymResult(
            text="".join(graphemes),
            graphemes=graphemes,
            first=graphemes[0] if n else "",
            last=graphemes[-1] if n else "",
        )

    first, last = graphemes[0], graphemes[-1]
    elided = n - 2
    result = NumeronymResult(
        text=f"{first}{elided}{last}",
        graphemes=graphemes,
        first=first,
        last=last,
        elided=elided,
    )
    logger.debug("Abbreviated %r -> %r (%d clusters)", text, result.text, n)
    return result


def generate_numeronym(text: str) -> str:
    """Return the numeronym of text ("localization" -> "l10n").

    Never fails for str input: empty and whitespace-only strings give "",
    and one- or two-cluster inputs are returned lowercased without a count.
    """
    return abbreviate(text).text
