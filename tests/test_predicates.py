import pytest

from emojikit.predicates import contains_only_emoji, is_emoji, is_emoji_cluster, is_single_emoji
from emojikit.ucd import PropertyTable

SMILE = "\U0001F60A"
FIRE = "\U0001F525"
WAVE_MEDIUM = "\U0001F44B\U0001F3FD"
FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466"
TECHNOLOGIST = "\U0001F469\u200d\U0001F4BB"
RED_HAIR_MEDIUM = "\U0001F469\U0001F3FD\u200d\U0001F9B0"
RAINBOW_FLAG = "\U0001F3F3\ufe0f\u200d\U0001F308"
FLAG_KR = "\U0001F1F0\U0001F1F7"
FLAG_US = "\U0001F1FA\U0001F1F8"


class TestContainsOnlyEmoji:
    @pytest.mark.parametrize("text", [
        SMILE,
        FIRE,
        "\u2764\ufe0f",  # heart + VS-16
        WAVE_MEDIUM,
        FLAG_KR,
        FLAG_US,
        FAMILY,
        TECHNOLOGIST,
        RED_HAIR_MEDIUM,
        RAINBOW_FLAG,
        "\u00a9\ufe0f",
        "\u2122\ufe0f",
        "\u25b6\ufe0f",
        "\u21a9\ufe0f",
        SMILE + SMILE,
        FLAG_KR + FLAG_US,
    ])
    def test_true(self, text):
        assert contains_only_emoji(text)

    @pytest.mark.parametrize("base", list("0123456789#*"))
    def test_keycaps(self, base):
        assert contains_only_emoji(base + "\ufe0f\u20e3")

    def test_keycap_without_vs16(self):
        assert contains_only_emoji("5\u20e3")

    @pytest.mark.parametrize("text", [
        "",
        "abc",
        " ",
        "1",
        "123",
        "#",
        "*",
        "\u00a9",
        "\u2122",
        SMILE + "abc",
        SMILE + " " + SMILE,
        "\ufe0f",
        "\u20e3",
        "\u200d",
    ])
    def test_false(self, text):
        assert not contains_only_emoji(text)

    def test_bare_skin_tone_is_emoji(self):
        # U+1F3FB..U+1F3FF carry Emoji_Presentation
        assert contains_only_emoji("\U0001F3FD")

    def test_is_emoji_alias(self):
        assert is_emoji is contains_only_emoji
        assert is_emoji("#\ufe0f\u20e3")
        assert not is_emoji("#")
        assert not is_emoji("\u00a9")
        assert is_emoji("\u00a9\ufe0f")


class TestIsEmojiCluster:
    def test_empty_cluster(self):
        assert is_emoji_cluster("") is False

    def test_keycap_rule_runs_before_base_check(self):
        # U+20E3 is not Emoji_Presentation, yet the keycap is an emoji
        assert is_emoji_cluster("#\u20e3")

    def test_keycap_mark_on_non_keycap_base(self):
        assert not is_emoji_cluster("a\u20e3")

    def test_text_symbol_with_emoji_base(self):
        # letter mixed into an otherwise valid cluster fails the purity check
        assert not is_emoji_cluster(SMILE + "\u0301")

    def test_vs16_on_non_emoji(self):
        assert not is_emoji_cluster("a\ufe0f")

    def test_uses_given_table(self):
        empty = PropertyTable("0.0", {})
        assert not is_emoji_cluster(SMILE, empty)
        # regional indicators and keycaps are structural
        assert is_emoji_cluster(FLAG_KR, empty)
        assert is_emoji_cluster("1\ufe0f\u20e3", empty)


class TestIsSingleEmoji:
    @pytest.mark.parametrize("text", [SMILE, FAMILY, FLAG_KR, "1\ufe0f\u20e3", WAVE_MEDIUM])
    def test_true(self, text):
        assert is_single_emoji(text)

    @pytest.mark.parametrize("text", [SMILE + SMILE, "a", "1", "", "\u00a9", FLAG_KR + FLAG_US])
    def test_false(self, text):
        assert not is_single_emoji(text)


class TestLoneSurrogates:
    @pytest.mark.parametrize("text", ["\ud83d", "\ude0a", SMILE + "\ud83d", "\ud83d" + SMILE])
    def test_not_emoji(self, text):
        assert contains_only_emoji(text) is False
        assert is_single_emoji(text) is False

    def test_cluster_with_surrogate(self):
        assert is_emoji_cluster("\ud83d") is False
