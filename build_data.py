import json
import sys

from emojikit.ucd import (
    DATA_FILE,
    EMOJI_PROPERTIES,
    PropertyTable,
    parse_emoji_data,
    parse_emoji_version,
)

def build_emoji_properties(input_file, output_file):
    """
    Parses Unicode's emoji-data.txt to create the packaged property table:
    1. Merged code point ranges for each emoji property the classifier uses.
    2. The emoji release the data belongs to, read from the file header.
    """

    print(f"Reading {input_file}...")

    with open(input_file, 'r', encoding='utf-8') as f:
        txt = f.read()

    # --- 1. Version Detection ---
    # Header looks like "# Used with Emoji Version 15.1 and subsequent minor revisions"
    version = parse_emoji_version(txt)
    if version == "unknown":
        print("WARNING: No emoji version found in header; table will be marked 'unknown'.")

    # --- 2. Range Extraction ---
    ranges = parse_emoji_data(txt, EMOJI_PROPERTIES)

    for prop in EMOJI_PROPERTIES:
        if not ranges[prop]:
            print(f"WARNING: No ranges found for {prop}. Is this really emoji-data.txt?")

    # --- 3. Serialize ---
    # Round-trip through PropertyTable so the written payload is exactly what the loader accepts.
    table = PropertyTable(version, ranges)
    payload = table.to_json()

    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=1)
        f.write("\n")

    print("------------------------------------------------")
    print(f"SUCCESS: Built emoji property table for Emoji {version}.")
    for prop in EMOJI_PROPERTIES:
        print(f"  {prop}: {table.range_count(prop)} ranges")
    print(f"File saved: {output_file}")

# TRIGGER THE FUNCTION
if __name__ == "__main__":
    args = sys.argv[1:]
    input_file = args[0] if len(args) > 0 else 'emoji-data.txt'
    output_file = args[1] if len(args) > 1 else str(DATA_FILE)
    build_emoji_properties(input_file, output_file)
