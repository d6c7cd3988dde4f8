import json

from build_data import build_emoji_properties
from emojikit.ucd import load_property_table

EMOJI_DATA = """\
# emoji-data.txt
# Used with Emoji Version 16.0 and subsequent minor revisions (if any)

00A9          ; Emoji                # E0.6   [1] (©️) copyright
1F44B         ; Emoji                # E0.6   [1] (\U0001F44B) waving hand
1F44C         ; Emoji                # E0.6   [1] (\U0001F44C) OK hand
1F3FB..1F3FF  ; Emoji                # E1.0   [5] light skin tone..dark skin tone
1F44B..1F44C  ; Emoji_Presentation   # E0.6   [2] waving hand..OK hand
1F3FB..1F3FF  ; Emoji_Presentation   # E1.0   [5] light skin tone..dark skin tone
1F3FB..1F3FF  ; Emoji_Modifier       # E1.0   [5] light skin tone..dark skin tone
1F44B..1F44C  ; Emoji_Modifier_Base  # E0.6   [2] waving hand..OK hand
"""


def test_build_writes_loadable_table(tmp_path, capsys):
    source = tmp_path / "emoji-data.txt"
    source.write_text(EMOJI_DATA, encoding="utf-8")
    target = tmp_path / "emoji_properties.json"

    build_emoji_properties(str(source), str(target))

    payload = json.loads(target.read_text(encoding="utf-8"))
    assert payload["version"] == "16.0"
    assert payload["properties"]["Emoji"] == ["00A9", "1F3FB..1F3FF", "1F44B..1F44C"]
    assert payload["properties"]["Emoji_Modifier"] == ["1F3FB..1F3FF"]

    table = load_property_table(target)
    assert table.version == "16.0"
    assert table.is_emoji_modifier_base(0x1F44C)
    out = capsys.readouterr().out
    assert "SUCCESS" in out
    assert "-" * 48 + "\n" in out
