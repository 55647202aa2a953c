"""
Tag domain objects for gffonts_index.

A tagging associates a family (and optionally a designspace location within
that family) with a tag and a numeric value:
  - "Roboto Slab, /quant/stroke_width_min, 26.31"
  - "Georama, "ital,wght@1,100", /quant/stroke_width_min, 16.97"

Tag metadata describes the valid range and a user friendly name for a tag:
  - "/Quality/Drawing, 0, 100, drawing quality"

Both are immutable value objects.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..errors import TagFormatError
from ..tags import csv_values, parse_float


@dataclass(frozen=True)
class Tagging:
    """
    A tag entry for a family.

    Attributes:
        family: Font family name
        location: Designspace location in fonts web API form, for example
            ``ital,wght@1,700`` for the italic style at weight 700.
            Empty when the tag applies to the whole family.
        tag: Tag name (e.g., "/quant/stroke_width_min")
        value: Tag value
    """

    family: str
    location: str
    tag: str
    value: float

    @classmethod
    def parse(cls, line: str) -> 'Tagging':
        """
        Parse a tag line.

        Accepts ``family, tag, value`` or ``family, location, tag, value``.

        Raises:
            TagFormatError: On a wrong number of fields or a non-numeric value
        """
        values = csv_values(line)
        if len(values) == 3:
            family, tag, value = values
            location = ""
        elif len(values) == 4:
            family, location, tag, value = values
        else:
            raise TagFormatError(
                f"Unparseable tag, expected 3 or 4 values but found {len(values)}", line
            )
        return cls(
            family=family,
            location=location,
            tag=tag,
            value=parse_float(value, "tag value", line),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'family': self.family,
            'location': self.location,
            'tag': self.tag,
            'value': self.value,
        }

    def __str__(self) -> str:
        if self.location:
            return f"{self.family} ({self.location}) {self.tag}={self.value:g}"
        return f"{self.family} {self.tag}={self.value:g}"


@dataclass(frozen=True)
class TagMetadata:
    """
    Metadata for a tag.

    Attributes:
        tag: Tag name (e.g., "/Quality/Drawing")
        min_value: Minimum tag value
        max_value: Maximum tag value
        prompt_name: User friendly name (e.g., "drawing quality")
    """

    tag: str
    min_value: float
    max_value: float
    prompt_name: str

    @classmethod
    def parse(cls, line: str) -> 'TagMetadata':
        """
        Parse a ``tag, min, max, prompt name`` line.

        Raises:
            TagFormatError: On a wrong number of fields or non-numeric bounds
        """
        values = csv_values(line)
        if len(values) != 4:
            raise TagFormatError(
                "Unparseable tag metadata, wrong number of values", line
            )
        tag, min_value, max_value, prompt_name = values
        return cls(
            tag=tag,
            min_value=parse_float(min_value, "min value", line),
            max_value=parse_float(max_value, "max value", line),
            prompt_name=prompt_name,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'tag': self.tag,
            'min_value': self.min_value,
            'max_value': self.max_value,
            'prompt_name': self.prompt_name,
        }
