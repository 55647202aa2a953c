"""
Domain layer for gffonts_index.

Contains pure domain objects with no I/O or side effects:
- FamilyEntry: A discovered METADATA.pb and its parse outcome
- Tagging: A tag value for a family or family location
- TagMetadata: Range and prompt name for a tag

Family, font and language records themselves are protobuf messages from
the gfmetadata schema package.
"""

from .family import FamilyEntry
from .tag import Tagging, TagMetadata

__all__ = [
    'FamilyEntry',
    'Tagging',
    'TagMetadata',
]
