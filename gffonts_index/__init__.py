"""
gffonts_index - Read-only access to Google Fonts repository metadata.

gffonts_index discovers, parses and caches the METADATA.pb records, quality
tags and language data of a local checkout of the Google Fonts repository,
and answers questions such as "which font file best represents this family"
or "what language should sample text use for this family".

Quick Start:
    import gffonts_index

    # Create instance (uses config defaults)
    gf = gffonts_index.create()

    # Or with an explicit checkout and family filter
    gf = gffonts_index.GoogleFonts("~/oss/fonts", family_filter=r"ofl/noto")

    # Discover families
    for entry in gf.families():
        if entry.ok:
            print(entry.family.name, gf.exemplar(entry.family).filename)

    # Resolve a font back to its family and binary
    path, family = gf.family(font)
    binary = gf.find_font_binary(font)

    # Sample text language
    print(gf.primary_language(family).id)

    # Quality tags
    for tagging in gf.family_tags("Roboto"):
        print(tagging.tag, tagging.value)

Domain Objects:
    FamilyEntry - A discovered METADATA.pb and its parse outcome
    Tagging - A tag value for a family or family location
    TagMetadata - Range and prompt name for a tag
"""

__version__ = "0.1.0"

# High-level API
from .api import GoogleFonts, create

# Domain objects
from .domain import FamilyEntry, Tagging, TagMetadata

# Readers and heuristics
from .reader import read_family, read_family_file, read_language, read_language_file
from .selection import FontStyle, exemplar, select_font
from .languages import primary_language
from .tags import csv_values

# Errors
from .errors import (
    MetadataError,
    TagFormatError,
    UnterminatedQuoteError,
    TagFileError,
    MissingFallbackLanguageError,
)

# Configuration
from .config import load_config

__all__ = [
    # Version
    "__version__",
    # High-level API
    "GoogleFonts",
    "create",
    # Domain objects
    "FamilyEntry",
    "Tagging",
    "TagMetadata",
    # Readers and heuristics
    "read_family",
    "read_language",
    "read_family_file",
    "read_language_file",
    "FontStyle",
    "exemplar",
    "select_font",
    "primary_language",
    "csv_values",
    # Errors
    "MetadataError",
    "TagFormatError",
    "UnterminatedQuoteError",
    "TagFileError",
    "MissingFallbackLanguageError",
    # Configuration
    "load_config",
]
