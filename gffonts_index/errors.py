"""
Error types for gffonts_index.

Family parse failures are reported with the protobuf text-format
``ParseError`` unchanged; the types here cover tag data and the
language knowledge base.
"""

from pathlib import Path
from typing import Optional


class MetadataError(Exception):
    """Base class for gffonts_index errors."""


class TagFormatError(MetadataError, ValueError):
    """A tag or tag-metadata row could not be parsed."""

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line


class UnterminatedQuoteError(TagFormatError):
    """A quoted CSV field has no closing quote."""

    def __init__(self, line: str):
        super().__init__(f"No closing quote in {line!r}", line)


class TagFileError(MetadataError):
    """
    A tag file could not be read or contained a malformed row.

    The underlying error is chained as ``__cause__``.
    """

    def __init__(self, path: Path, message: str, line_number: Optional[int] = None):
        location = f"{path}:{line_number}" if line_number is not None else str(path)
        super().__init__(f"{location}: {message}")
        self.path = path
        self.line_number = line_number


class MissingFallbackLanguageError(MetadataError):
    """The language knowledge base has no entry for the fallback language."""

    def __init__(self, family_name: str, lang_id: str):
        super().__init__(
            f"Not even our final fallback ({lang_id}) worked for {family_name}"
        )
        self.family_name = family_name
        self.lang_id = lang_id
