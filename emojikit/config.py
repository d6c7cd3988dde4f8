"""
Input configuration for the keystroke filter.

Only the settings the engine acts on are modelled here. Presentation
settings of the host input surface (haptics, dictation) stay with the host.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Mapping, Optional

from .skin_tone import SkinTone

logger = logging.getLogger(__name__)

_TRUE_STRINGS = frozenset(["true", "1", "yes"])
_FALSE_STRINGS = frozenset(["false", "0", "no"])


def _coerce_flag(name: str, value: Any) -> bool:
    """
    Reads a boolean setting. Accepts bools, 0/1 and the strings
    true/false/1/0/yes/no in any case. Raises ValueError for anything else.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _TRUE_STRINGS:
            return True
        if key in _FALSE_STRINGS:
            return False
    raise ValueError(f"Invalid value for {name}: {value!r}")


@dataclass(frozen=True)
class EmojiInputConfig:
    """
    emoji_only: accept only a single emoji per insertion (strict mode).
                When False any non-empty insertion is forwarded (lenient mode).
    normalize_skin_tone: tone applied to accepted text, or None to forward
                         the glyph untouched.
    """
    emoji_only: bool = True
    normalize_skin_tone: Optional[SkinTone] = None

    DEFAULT: ClassVar["EmojiInputConfig"]

    def __post_init__(self):
        if self.normalize_skin_tone is not None:
            # frozen dataclass: bypass __setattr__ for the coerced value
            object.__setattr__(self, 'normalize_skin_tone', SkinTone.coerce(self.normalize_skin_tone))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "EmojiInputConfig":
        """Builds a config from plain settings, e.g. {"normalize_skin_tone": "dark"}."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            if key in known:
                kwargs[key] = value
            else:
                logger.debug("Ignoring unknown input setting %r", key)

        if "emoji_only" in kwargs:
            kwargs["emoji_only"] = _coerce_flag("emoji_only", kwargs["emoji_only"])
        return cls(**kwargs)


EmojiInputConfig.DEFAULT = EmojiInputConfig()
