"""
Unicode Property Table

Versioned, read-only lookup of the four emoji properties used by the
classifier (Emoji, Emoji_Presentation, Emoji_Modifier_Base, Emoji_Modifier).

The table is generated from Unicode's emoji-data.txt by build_data.py and
shipped as data/emoji_properties.json. Each property is held in a sorted
range store and queried with bisect, so a lookup is O(log n) in the number
of ranges. Code points missing from every store have all properties false.
"""

import bisect
import json
import logging
import re
import threading
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .errors import PropertyTableError

logger = logging.getLogger(__name__)

# ===============================================
# BLOCK 1. CONSTANTS
# ===============================================

EMOJI_DATA_VERSION = "15.1"

DATA_FILE = Path(__file__).parent / "data" / "emoji_properties.json"

# Properties we keep from emoji-data.txt. Emoji_Component and
# Extended_Pictographic are not needed by the classifier.
EMOJI_PROPERTIES = (
    "Emoji",
    "Emoji_Presentation",
    "Emoji_Modifier_Base",
    "Emoji_Modifier",
)

MAX_CODEPOINT = 0x10FFFF

# Header lines carrying the release number, e.g.
#   # Used with Emoji Version 15.1 and subsequent minor revisions (if any)
#   # Version: 15.1
_VERSION_PATTERNS = (
    re.compile(r"Emoji Version (\d+\.\d+)"),
    re.compile(r"^#\s*Version:\s*(\d+\.\d+)"),
)

# ===============================================
# BLOCK 2. PARSERS
# ===============================================

def _parse_range_token(code_range: str) -> Tuple[int, int]:
    """'1F600..1F64F' -> (0x1F600, 0x1F64F); '00A9' -> (0xA9, 0xA9)"""
    code_range = code_range.strip()
    if '..' in code_range:
        a, b = code_range.split('..', 1)
        start, end = int(a, 16), int(b, 16)
    else:
        start = end = int(code_range, 16)
    if start > end or end > MAX_CODEPOINT:
        raise ValueError(f"bad code point range {code_range!r}")
    return start, end


def _format_range(start: int, end: int) -> str:
    if start == end:
        return f"{start:04X}"
    return f"{start:04X}..{end:04X}"


def _merge_ranges(ranges: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
    """Sort and coalesce overlapping or adjacent ranges."""
    merged: List[Tuple[int, int]] = []
    for start, end in sorted(ranges):
        if merged and start <= merged[-1][1] + 1:
            prev_start, prev_end = merged[-1]
            merged[-1] = (prev_start, max(prev_end, end))
        else:
            merged.append((start, end))
    return merged


def parse_emoji_version(txt: str) -> str:
    """Reads the emoji release from the emoji-data.txt header comments."""
    for raw in txt.splitlines():
        if not raw.startswith('#'):
            continue
        for pattern in _VERSION_PATTERNS:
            m = pattern.search(raw)
            if m:
                return m.group(1)
    return "unknown"


def parse_emoji_data(txt: str, properties=EMOJI_PROPERTIES) -> Dict[str, List[Tuple[int, int]]]:
    """
    Parses emoji-data.txt into merged range lists per property.

    Format:
    1F600..1F64F  ; Emoji_Presentation   # E1.0  [80] (😀..🙏) grinning face..
    00A9          ; Emoji                # E0.6   [1] (©️)  copyright

    Only the requested properties are kept. Malformed lines are skipped.
    """
    temp_ranges: Dict[str, List[Tuple[int, int]]] = {prop: [] for prop in properties}
    skipped = 0

    for line_idx, raw in enumerate(txt.splitlines()):
        line = raw.split('#', 1)[0].strip()
        if not line:
            continue

        parts = line.split(';', 1)
        if len(parts) < 2:
            skipped += 1
            continue

        code_range, prop_name = parts[0].strip(), parts[1].strip()
        if prop_name not in temp_ranges:
            continue

        try:
            temp_ranges[prop_name].append(_parse_range_token(code_range))
        except ValueError:
            skipped += 1
            logger.debug("Skipped line %d: %s", line_idx, raw)

    if skipped:
        logger.debug("Skipped %d malformed emoji-data lines.", skipped)

    return {prop: _merge_ranges(ranges) for prop, ranges in temp_ranges.items()}

# ===============================================
# BLOCK 3. THE TABLE
# ===============================================

def _build_store(ranges: List[Tuple[int, int]]) -> dict:
    store = {"ranges": [], "starts": [], "ends": []}
    for s, e in sorted(ranges):
        store["ranges"].append((s, e))
        store["starts"].append(s)
        store["ends"].append(e)
    return store


class PropertyTable:
    """
    Immutable emoji property lookup for one emoji-data release.

    Instances are safe to share between threads: nothing is written after
    __init__ returns.
    """

    __slots__ = ('_version', '_stores')

    def __init__(self, version: str, ranges: Dict[str, List[Tuple[int, int]]]):
        self._version = version
        self._stores = {}
        for prop in EMOJI_PROPERTIES:
            store = _build_store(ranges.get(prop, []))
            self._stores[prop] = store
            logger.debug("Loaded %d ranges for %s.", len(store["ranges"]), prop)

    def __repr__(self):
        return f"PropertyTable(version={self._version!r})"

    @property
    def version(self) -> str:
        return self._version

    # --- Constructors ---

    @classmethod
    def from_emoji_data(cls, txt: str) -> "PropertyTable":
        """Builds a table straight from the text of an emoji-data.txt file."""
        return cls(parse_emoji_version(txt), parse_emoji_data(txt))

    @classmethod
    def from_json(cls, payload: dict) -> "PropertyTable":
        """Builds a table from the JSON payload written by build_data.py."""
        try:
            version = str(payload["version"])
            raw_props = payload["properties"]
            ranges = {
                prop: [_parse_range_token(tok) for tok in raw_props.get(prop, [])]
                for prop in EMOJI_PROPERTIES
            }
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise PropertyTableError(f"Malformed emoji property payload: {e}") from e
        return cls(version, ranges)

    def to_json(self) -> dict:
        return {
            "version": self._version,
            "source": "emoji-data.txt",
            "properties": {
                prop: [_format_range(s, e) for s, e in self._stores[prop]["ranges"]]
                for prop in EMOJI_PROPERTIES
            },
        }

    # --- Lookups ---

    def has(self, cp: int, prop: str) -> bool:
        """Generic range finder using bisect. Unknown properties are false."""
        store = self._stores.get(prop)
        if store is None:
            return False

        starts_list = store["starts"]
        if not starts_list:
            return False

        i = bisect.bisect_right(starts_list, cp) - 1
        return i >= 0 and cp <= store["ends"][i]

    def is_emoji(self, cp: int) -> bool:
        return self.has(cp, "Emoji")

    def is_emoji_presentation(self, cp: int) -> bool:
        return self.has(cp, "Emoji_Presentation")

    def is_emoji_modifier_base(self, cp: int) -> bool:
        return self.has(cp, "Emoji_Modifier_Base")

    def is_emoji_modifier(self, cp: int) -> bool:
        return self.has(cp, "Emoji_Modifier")

    def ranges(self, prop: str) -> List[Tuple[int, int]]:
        store = self._stores.get(prop)
        return list(store["ranges"]) if store else []

    def range_count(self, prop: str) -> int:
        store = self._stores.get(prop)
        return len(store["ranges"]) if store else 0

# ===============================================
# BLOCK 4. LOADERS
# ===============================================

_DEFAULT_TABLE: Optional[PropertyTable] = None
_LOADING_LOCK = threading.Lock()


def load_property_table(path=None) -> PropertyTable:
    """
    Loads a property table from a JSON file (the packaged one by default).

    Raises PropertyTableError if the file is missing or unreadable.
    """
    path = Path(path) if path is not None else DATA_FILE
    try:
        with open(path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except (OSError, ValueError) as e:
        raise PropertyTableError(f"Failed to load emoji property table from {path}: {e}") from e

    table = PropertyTable.from_json(payload)
    logger.info("Emoji property table ready (Unicode emoji %s, %s).", table.version, path.name)
    return table


def get_property_table() -> PropertyTable:
    """Returns the process-wide default table, loading it on first use."""
    global _DEFAULT_TABLE
    table = _DEFAULT_TABLE
    if table is not None:
        return table

    with _LOADING_LOCK:
        if _DEFAULT_TABLE is None:
            _DEFAULT_TABLE = load_property_table()
        return _DEFAULT_TABLE

# ===============================================
# BLOCK 5. SELF-TESTS
# ===============================================

def run_self_tests(table: Optional[PropertyTable] = None) -> bool:
    """
    Verifies structural invariants of a property table.
    Logs one PASS / CRITICAL FAIL line per check and returns overall success.
    """
    table = table or get_property_table()
    logger.info("--- Running Property Table Self-Tests (emoji %s) ---", table.version)
    ok = True

    def report(passed: bool, name: str, detail: str = ""):
        nonlocal ok
        if passed:
            logger.info("PASS: %s", name)
        else:
            ok = False
            logger.error("CRITICAL FAIL: %s %s", name, detail)

    # 1. Stores are sorted and disjoint
    for prop in EMOJI_PROPERTIES:
        ranges = table.ranges(prop)
        disjoint = all(
            s <= e and (i == 0 or ranges[i - 1][1] < s)
            for i, (s, e) in enumerate(ranges)
        )
        report(disjoint and bool(ranges), f"{prop} ranges sorted and disjoint")

    # 2. Subset relations from UTS #51
    def check_subset(prop: str, parent: str):
        missing = [
            cp
            for s, e in table.ranges(prop)
            for cp in range(s, e + 1)
            if not table.has(cp, parent)
        ]
        detail = ", ".join(f"U+{cp:04X}" for cp in missing[:5])
        report(not missing, f"{prop} within {parent}", detail)

    check_subset("Emoji_Presentation", "Emoji")
    check_subset("Emoji_Modifier", "Emoji")
    check_subset("Emoji_Modifier_Base", "Emoji")

    # 3. Known anchors
    report(
        all(table.is_emoji_modifier(cp) for cp in range(0x1F3FB, 0x1F400)),
        "Skin tone modifiers (U+1F3FB..U+1F3FF)",
    )
    report(
        all(table.is_emoji_presentation(cp) for cp in range(0x1F1E6, 0x1F200)),
        "Regional indicators (U+1F1E6..U+1F1FF)",
    )
    report(
        table.is_emoji(0x00A9) and not table.is_emoji_presentation(0x00A9),
        "Text-default symbol (U+00A9)",
    )

    logger.info("--- Self-Tests Complete ---")
    return ok
