"""Exception types raised by emojikit.

Text operations never raise. The only failure class is a missing or corrupt
property table, which is a packaging problem rather than an input problem.
"""


class EmojiKitError(Exception):
    """Base class for all emojikit errors."""


class PropertyTableError(EmojiKitError):
    """The emoji property table could not be loaded or parsed."""
