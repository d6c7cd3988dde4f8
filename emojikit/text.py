"""
String Utility Layer

Extraction, counting and removal of emoji in arbitrary text. All helpers
walk the grapheme clusters once and preserve source order.
"""

import re
from typing import List, Optional, Tuple

from .predicates import is_emoji_cluster
from .segment import grapheme_spans, graphemes
from .ucd import PropertyTable, get_property_table

WHITESPACE_RUN = re.compile(r'\s+')


def emojis(text: str, table: Optional[PropertyTable] = None) -> List[str]:
    """All emoji clusters in `text`, in order, duplicates kept."""
    table = table or get_property_table()
    return [cluster for cluster in graphemes(text) if is_emoji_cluster(cluster, table)]


def emoji_count(text: str, table: Optional[PropertyTable] = None) -> int:
    return len(emojis(text, table))


def emoji_spans(text: str, table: Optional[PropertyTable] = None) -> List[Tuple[int, int, str]]:
    """Emoji clusters with their [start, end) code point offsets in `text`."""
    table = table or get_property_table()
    return [
        (start, end, cluster)
        for start, end, cluster in grapheme_spans(text)
        if is_emoji_cluster(cluster, table)
    ]


def remove_emojis(text: str, table: Optional[PropertyTable] = None) -> str:
    """
    Drops every emoji cluster and keeps everything else byte for byte,
    including the whitespace that surrounded the emoji.
    """
    table = table or get_property_table()
    return "".join(cluster for cluster in graphemes(text) if not is_emoji_cluster(cluster, table))


def strip_emojis(text: str, table: Optional[PropertyTable] = None) -> str:
    """remove_emojis(), then collapse whitespace runs to one space and trim."""
    return WHITESPACE_RUN.sub(' ', remove_emojis(text, table)).strip()
