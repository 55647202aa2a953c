"""
Family entry domain object for gffonts_index.

A FamilyEntry records one discovered METADATA.pb file together with the
outcome of parsing it, so a malformed family is visible to callers instead
of silently disappearing from the scan.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from gfmetadata.fonts_public_pb2 import FamilyProto


@dataclass(frozen=True)
class FamilyEntry:
    """
    A discovered family metadata file.

    Exactly one of ``family`` and ``error`` is set.

    Attributes:
        path: Path to the METADATA.pb file
        family: Parsed family, if parsing succeeded
        error: The read or parse error otherwise
    """

    path: Path
    family: Optional[FamilyProto] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def directory(self) -> Path:
        """Directory holding the METADATA.pb and its font binaries."""
        return self.path.parent

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            'path': str(self.path),
            'ok': self.ok,
        }
        if self.family is not None:
            result['name'] = self.family.name
            result['fonts'] = len(self.family.fonts)
        if self.error is not None:
            result['error'] = str(self.error)
        return result

    def __str__(self) -> str:
        if self.family is not None:
            return f"{self.family.name} ({self.path})"
        return f"<unparseable> ({self.path})"
