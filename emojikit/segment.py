"""
Grapheme Segmenter (UAX #29)

Splits text into extended grapheme clusters. Every emoji decision in the
package is made per cluster, so ZWJ sequences, keycaps and flag pairs must
arrive here as one unit. The `regex` module's \\X implements the extended
grapheme cluster rules; `str` iteration alone would give code points.
"""

from typing import Iterator, Tuple

import regex

GRAPHEME_PATTERN = regex.compile(r'\X', regex.DOTALL)


def graphemes(text: str) -> Iterator[str]:
    """Yields the grapheme clusters of `text` in source order."""
    for m in GRAPHEME_PATTERN.finditer(text):
        yield m.group(0)


def grapheme_spans(text: str) -> Iterator[Tuple[int, int, str]]:
    """Like graphemes(), with [start, end) code point offsets."""
    for m in GRAPHEME_PATTERN.finditer(text):
        yield m.start(), m.end(), m.group(0)


def grapheme_count(text: str) -> int:
    count = 0
    for _ in GRAPHEME_PATTERN.finditer(text):
        count += 1
    return count
