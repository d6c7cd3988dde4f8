"""
Keystroke filter: the engine side of an emoji-only input surface.

The host hands over each proposed insertion. The filter decides whether it
is accepted, normalizes its skin tone when configured to, and forwards the
result to the selection callback. The host never inserts the raw keystroke
itself, so should_change_characters() always answers False.
"""

from typing import Callable, Optional

from .config import EmojiInputConfig
from .predicates import is_single_emoji
from .skin_tone import normalize_skin_tone
from .ucd import PropertyTable

EmojiCallback = Callable[[str], None]


class EmojiInputFilter:

    __slots__ = ('config', 'on_emoji_selected', '_table')

    def __init__(
        self,
        config: EmojiInputConfig = EmojiInputConfig.DEFAULT,
        on_emoji_selected: Optional[EmojiCallback] = None,
        table: Optional[PropertyTable] = None,
    ):
        self.config = config
        self.on_emoji_selected = on_emoji_selected
        self._table = table

    def accepts(self, proposed: str) -> bool:
        if not proposed:
            return False
        if self.config.emoji_only:
            return is_single_emoji(proposed, self._table)
        return True

    def filter(self, proposed: str) -> Optional[str]:
        """
        Returns the text to forward for `proposed`, or None when rejected.
        Accepted text is passed to on_emoji_selected before returning.
        """
        if not self.accepts(proposed):
            return None

        selected = proposed
        tone = self.config.normalize_skin_tone
        if tone is not None:
            selected = normalize_skin_tone(selected, tone, self._table)

        if self.on_emoji_selected is not None:
            self.on_emoji_selected(selected)
        return selected

    def should_change_characters(self, proposed: str) -> bool:
        self.filter(proposed)
        return False
