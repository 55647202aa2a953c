"""
Readers for family and language metadata.

METADATA.pb files are protobuf text format. Some families carry an
undocumented ``position { ... }`` field that the published schema does not
know about; it is stripped before parsing.
"""

from pathlib import Path
from typing import Union
import re

from google.protobuf import text_format
from gfmetadata.fonts_public_pb2 import FamilyProto
from gfmetadata.languages_public_pb2 import LanguageProto

POSITION_RE = re.compile(r"position\s+\{[^}]*\}", re.MULTILINE)


def strip_undocumented_fields(text: str) -> str:
    """Remove ``position { ... }`` blocks from METADATA.pb text."""
    if "position" not in text:
        return text
    return POSITION_RE.sub("", text)


def read_family(text: str) -> FamilyProto:
    """
    Read a FamilyProto from METADATA.pb content.

    Raises:
        text_format.ParseError: If the content is not a valid FamilyProto
    """
    return text_format.Parse(strip_undocumented_fields(text), FamilyProto())


def read_language(text: str) -> LanguageProto:
    """
    Read a LanguageProto from textproto content.

    Raises:
        text_format.ParseError: If the content is not a valid LanguageProto
    """
    return text_format.Parse(text, LanguageProto())


def read_family_file(path: Union[str, Path]) -> FamilyProto:
    """Read a FamilyProto from a METADATA.pb file."""
    return read_family(Path(path).read_text(encoding="utf-8"))


def read_language_file(path: Union[str, Path]) -> LanguageProto:
    """Read a LanguageProto from a textproto file."""
    return read_language(Path(path).read_text(encoding="utf-8"))
