import pytest

from emojikit.sequences import ZWJ_CHAR, emoji_components

FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466"
RED_HAIR_MEDIUM = "\U0001F469\U0001F3FD\u200d\U0001F9B0"
RAINBOW_FLAG = "\U0001F3F3\ufe0f\u200d\U0001F308"


@pytest.mark.parametrize("text, expected", [
    (FAMILY, ["\U0001F468", "\U0001F469", "\U0001F467", "\U0001F466"]),
    ("\U0001F469\u200d\U0001F4BB", ["\U0001F469", "\U0001F4BB"]),
    ("\U0001F60A", ["\U0001F60A"]),
    (RED_HAIR_MEDIUM, ["\U0001F469\U0001F3FD", "\U0001F9B0"]),
    (RAINBOW_FLAG, ["\U0001F3F3\ufe0f", "\U0001F308"]),
    ("\U0001F1F0\U0001F1F7", ["\U0001F1F0\U0001F1F7"]),
])
def test_components(text, expected):
    assert emoji_components(text) == expected


@pytest.mark.parametrize("text", ["hello", "", "\U0001F60A\U0001F60A", "a\u200db"])
def test_non_single_emoji_yields_nothing(text):
    assert emoji_components(text) == []


@pytest.mark.parametrize("text", [FAMILY, RED_HAIR_MEDIUM, RAINBOW_FLAG])
def test_join_reconstructs(text):
    assert ZWJ_CHAR.join(emoji_components(text)) == text


@pytest.mark.parametrize("text", ["\ud83d", "\U0001F60A\ud83d", "\U0001F468\u200d\ud83d"])
def test_lone_surrogate_yields_nothing(text):
    assert emoji_components(text) == []
