"""Sequence Decomposer: splits one ZWJ emoji into its component glyphs."""

from typing import List, Optional

from .predicates import ZWJ, is_single_emoji
from .ucd import PropertyTable

ZWJ_CHAR = chr(ZWJ)


def emoji_components(text: str, table: Optional[PropertyTable] = None) -> List[str]:
    """
    Returns the ZWJ-delimited parts of a single emoji, in order.

    "👨‍👩‍👧‍👦" -> ["👨", "👩", "👧", "👦"]. A base keeps its own skin tone and
    VS-16. Anything that is not exactly one emoji yields [].
    """
    if not is_single_emoji(text, table):
        return []

    components = []
    segment = []
    for char in text:
        if char == ZWJ_CHAR:
            if segment:
                components.append("".join(segment))
                segment = []
            continue
        segment.append(char)

    if segment:
        components.append("".join(segment))
    return components
