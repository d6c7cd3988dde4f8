"""
emojikit: Unicode emoji classification and normalization.

Pure, stateless helpers for deciding whether text is emoji, pulling emoji
out of text, splitting ZWJ sequences and rewriting skin tones. Property
lookups come from a versioned emoji-data table shipped with the package.
"""

from .config import EmojiInputConfig
from .errors import EmojiKitError, PropertyTableError
from .input_filter import EmojiInputFilter
from .predicates import contains_only_emoji, is_emoji, is_emoji_cluster, is_single_emoji
from .segment import grapheme_count, grapheme_spans, graphemes
from .sequences import emoji_components
from .skin_tone import SkinTone, detect_skin_tone, normalize_skin_tone
from .text import emoji_count, emoji_spans, emojis, remove_emojis, strip_emojis
from .ucd import EMOJI_DATA_VERSION, PropertyTable, get_property_table, load_property_table

__version__ = "0.1.0"

__all__ = [
    "EMOJI_DATA_VERSION",
    "EmojiInputConfig",
    "EmojiInputFilter",
    "EmojiKitError",
    "PropertyTable",
    "PropertyTableError",
    "SkinTone",
    "contains_only_emoji",
    "detect_skin_tone",
    "emoji_components",
    "emoji_count",
    "emoji_spans",
    "emojis",
    "get_property_table",
    "grapheme_count",
    "grapheme_spans",
    "graphemes",
    "is_emoji",
    "is_emoji_cluster",
    "is_single_emoji",
    "load_property_table",
    "normalize_skin_tone",
    "remove_emojis",
    "strip_emojis",
]
