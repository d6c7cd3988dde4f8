"""
Skin Tone Engine

Detects the Fitzpatrick modifier (U+1F3FB..U+1F3FF) carried by an emoji and
rewrites it. The rewrite is a single left-to-right pass: every existing tone
is dropped and, unless the target is STRIP, the target tone is emitted right
after each Emoji_Modifier_Base. In a ZWJ sequence such as a family every
person therefore gets the tone, and the pass is idempotent.
"""

from enum import Enum
from typing import Optional, Union

from .ucd import PropertyTable, get_property_table

SKIN_TONE_FIRST = 0x1F3FB
SKIN_TONE_LAST = 0x1F3FF


class SkinTone(Enum):
    """Skin tone normalization targets."""
    STRIP = "strip"
    LIGHT = "light"
    MEDIUM_LIGHT = "medium_light"
    MEDIUM = "medium"
    MEDIUM_DARK = "medium_dark"
    DARK = "dark"

    @property
    def codepoint(self) -> Optional[int]:
        """The modifier code point, or None for STRIP."""
        return _TONE_CODEPOINTS.get(self)

    @property
    def scalar(self) -> Optional[str]:
        cp = self.codepoint
        return chr(cp) if cp is not None else None

    @classmethod
    def from_codepoint(cls, cp: int) -> Optional["SkinTone"]:
        return _CODEPOINT_TONES.get(cp)

    @classmethod
    def coerce(cls, value: Union["SkinTone", str]) -> "SkinTone":
        """
        Accepts a member or its name/value ("dark", "MEDIUM_LIGHT",
        "medium-light"). Raises ValueError for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace('-', '_').replace(' ', '_')
            for tone in cls:
                if tone.value == key:
                    return tone
        raise ValueError(f"Unknown skin tone: {value!r}")


_TONE_CODEPOINTS = {
    SkinTone.LIGHT: 0x1F3FB,
    SkinTone.MEDIUM_LIGHT: 0x1F3FC,
    SkinTone.MEDIUM: 0x1F3FD,
    SkinTone.MEDIUM_DARK: 0x1F3FE,
    SkinTone.DARK: 0x1F3FF,
}
_CODEPOINT_TONES = {cp: tone for tone, cp in _TONE_CODEPOINTS.items()}


def is_skin_tone(cp: int) -> bool:
    return SKIN_TONE_FIRST <= cp <= SKIN_TONE_LAST


def detect_skin_tone(text: str) -> Optional[SkinTone]:
    """
    Returns the first skin tone found in `text`, or None when there is none.
    Never returns STRIP. Malformed input with several tones reports the first.
    """
    for char in text:
        tone = _CODEPOINT_TONES.get(ord(char))
        if tone is not None:
            return tone
    return None


def normalize_skin_tone(
    text: str,
    target: Union[SkinTone, str],
    table: Optional[PropertyTable] = None,
) -> str:
    """
    Rewrites every skin tone in `text` to `target`.

    - STRIP removes all tone modifiers.
    - Any other tone removes existing modifiers and appends the target tone
      after each Emoji_Modifier_Base, so a bare base gains a tone and text
      without a base only loses stray modifiers.
    """
    target = SkinTone.coerce(target)
    if not text:
        return text

    table = table or get_property_table()
    tone_char = target.scalar

    out = []
    for char in text:
        cp = ord(char)
        if is_skin_tone(cp):
            continue
        out.append(char)
        if tone_char is not None and table.is_emoji_modifier_base(cp):
            out.append(tone_char)
    return "".join(out)
