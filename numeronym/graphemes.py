"""
Grapheme segmentation for numeronym generation.

Text is iterated by extended grapheme clusters (UAX #29), not code points:
an accented letter written with a combining mark, a flag, or an emoji with
skin-tone modifiers and zero-width joiners is one user-perceived character
and is counted, filtered, and selected as one unit.

Stdlib `re` has no grapheme or Unicode-property support, so segmentation and
whitespace classification go through the `regex` package.
"""

import logging

import regex

logger = logging.getLogger(__name__)

# ── Compiled patterns ───────────────────────────────────────────────────────
# \X matches one extended grapheme cluster; a cluster is whitespace only when
# every code point in it carries the White_Space property.

_GRAPHEME_RE = regex.compile(r"\X")
_WHITESPACE_CLUSTER_RE = regex.compile(r"\p{White_Space}+")


def split_graphemes(text: str) -> list:
    """Split text into its ordered extended grapheme clusters.

    Joining the result always gives back the input unchanged.
    """
    if not text:
        return []
    return _GRAPHEME_RE.findall(text)


def is_whitespace_cluster(cluster: str) -> bool:
    """True when the cluster consists solely of Unicode whitespace.

    "\\r\\n" is a single cluster and counts as whitespace; a space carrying a
    combining mark does not.
    """
    return bool(cluster) and _WHITESPACE_CLUSTER_RE.fullmatch(cluster) is not None


def normalize_graphemes(text: str) -> tuple:
    """Segment text, drop whitespace clusters, and lowercase what remains.

    Each cluster is lowercased on its own with the Unicode lowercase mapping;
    clusters with no lowercase form come back unchanged.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    clusters = split_graphemes(text)
    kept = tuple(c.lower() for c in clusters if not is_whitespace_cluster(c))

    if len(kept) != len(clusters):
        logger.debug("Dropped %d whitespace cluster(s) from %r", len(clusters) - len(kept), text)
    return kept
