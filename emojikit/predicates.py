"""
Emoji Predicate Engine

Decides whether a grapheme cluster renders as an emoji, and lifts that
decision to whole strings.

A plain "is this code point Emoji" check is wrong in both directions:
digits and '#' carry the Emoji property but are not emoji on their own,
text-default symbols such as U+00A9 only become emoji with VS-16, and the
joiners inside ZWJ sequences carry no emoji property at all. The cluster
rule below handles each of those cases.
"""

from typing import Optional

from .segment import graphemes
from .ucd import PropertyTable, get_property_table

# --- Structural code points ---
ZWJ = 0x200D
VS16 = 0xFE0F
COMBINING_KEYCAP = 0x20E3
REGIONAL_INDICATOR_FIRST = 0x1F1E6
REGIONAL_INDICATOR_LAST = 0x1F1FF

# 0-9, '#', '*'
KEYCAP_BASES = frozenset(list(range(0x30, 0x3A)) + [0x23, 0x2A])


def _is_regional_indicator(cp: int) -> bool:
    return REGIONAL_INDICATOR_FIRST <= cp <= REGIONAL_INDICATOR_LAST


def is_emoji_cluster(cluster: str, table: Optional[PropertyTable] = None) -> bool:
    """
    True if a single grapheme cluster is an emoji.

    1. KEYCAP: a 0-9 / # / * base with U+20E3 anywhere in the cluster.
    2. BASE: at least one code point that is Emoji_Presentation,
       Emoji_Modifier_Base, a regional indicator, or Emoji promoted by VS-16.
    3. PURITY: every code point is emoji material (bases, modifiers, VS-16,
       ZWJ, regional indicators, the keycap mark, or Emoji promoted by VS-16).
    """
    if not cluster:
        return False

    table = table or get_property_table()
    cps = [ord(c) for c in cluster]

    # 1. Keycap shortcut (U+20E3 itself is not Emoji_Presentation)
    if cps[0] in KEYCAP_BASES and COMBINING_KEYCAP in cps:
        return True

    has_vs16 = VS16 in cps

    # 2. Base existence
    has_base = False
    for cp in cps:
        if (
            table.is_emoji_presentation(cp)
            or table.is_emoji_modifier_base(cp)
            or _is_regional_indicator(cp)
            or (has_vs16 and cp != VS16 and table.is_emoji(cp))
        ):
            has_base = True
            break
    if not has_base:
        return False

    # 3. Every code point must belong to the emoji rendering
    for cp in cps:
        if cp == VS16 or cp == ZWJ or cp == COMBINING_KEYCAP or _is_regional_indicator(cp):
            continue
        if (
            table.is_emoji_presentation(cp)
            or table.is_emoji_modifier_base(cp)
            or table.is_emoji_modifier(cp)
            or (has_vs16 and table.is_emoji(cp))
        ):
            continue
        return False

    return True


def contains_only_emoji(text: str, table: Optional[PropertyTable] = None) -> bool:
    """True if `text` is non-empty and every grapheme cluster is an emoji."""
    if not text:
        return False
    table = table or get_property_table()
    return all(is_emoji_cluster(cluster, table) for cluster in graphemes(text))


# Library surface name; same semantics as contains_only_emoji.
is_emoji = contains_only_emoji


def is_single_emoji(text: str, table: Optional[PropertyTable] = None) -> bool:
    """True if `text` is exactly one grapheme cluster and that cluster is an emoji."""
    if not text:
        return False

    clusters = graphemes(text)
    first = next(clusters, None)
    if first is None or next(clusters, None) is not None:
        return False
    return is_emoji_cluster(first, table)
