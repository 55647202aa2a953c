"""
Tag data utilities for gffonts_index.

Tag files in the fonts repository are loosely CSV formatted. Rows look like:
  - Roboto Slab, /quant/stroke_width_min, 26.31
  - Roboto Slab, wght@100, /quant/stroke_width_min, 26.31
  - Georama, "ital,wght@1,100", /quant/stroke_width_min, 16.97

Locations may contain commas, in which case they are double-quoted.
"""

from typing import Iterable, List, Optional
import re

from .errors import TagFormatError, UnterminatedQuoteError


def csv_values(line: str) -> List[str]:
    """
    Split one tag line into its fields.

    Whitespace around each field is trimmed. A field starting with a double
    quote runs to the next double quote and may contain commas; the quotes
    are not part of the value. Anything between the closing quote and the
    next comma is dropped.

    Args:
        line: A single line from a tag file

    Returns:
        List of field strings

    Raises:
        UnterminatedQuoteError: If a quoted field is never closed
    """
    values = []
    rest = line
    while rest:
        rest = rest.strip()
        if rest.startswith('"'):
            close = rest.find('"', 1)
            if close == -1:
                raise UnterminatedQuoteError(line)
            values.append(rest[1:close])
            _, _, rest = rest[close + 1:].partition(',')
        else:
            value, _, rest = rest.partition(',')
            values.append(value.strip())
    return values


def parse_float(value: str, what: str, line: str) -> float:
    """Parse a numeric tag field, raising TagFormatError on failure."""
    try:
        return float(value)
    except ValueError:
        raise TagFormatError(f"Invalid {what} {value!r}", line) from None


def filter_taggings(taggings: Iterable, family: str, location: Optional[str] = None) -> List:
    """
    Filter tag entries by family name and, optionally, location.

    Args:
        taggings: Tag entries to filter
        family: Exact family name
        location: Exact location ("" selects family-wide entries)

    Returns:
        Matching entries in their original order
    """
    return [
        t for t in taggings
        if t.family == family and (location is None or t.location == location)
    ]


def match_tag(tag: str, pattern: str) -> bool:
    """
    Check a tag name against a pattern.

    Tag names are slash separated paths such as ``/Quality/Drawing``.
    ``*`` in the pattern matches within a segment, a trailing ``/*``
    matches everything below a prefix.

    Examples:
        match_tag("/quant/stroke_width_min", "/quant/*")  -> True
        match_tag("/Sans/Humanist", "/Sans/Hum*")         -> True
    """
    if pattern == '*' or pattern == tag:
        return True
    if pattern.endswith('/*'):
        prefix = pattern[:-1]
        return tag.startswith(prefix)
    if '*' in pattern:
        regex = '^' + '[^/]*'.join(re.escape(p) for p in pattern.split('*')) + '$'
        return re.match(regex, tag) is not None
    return False
