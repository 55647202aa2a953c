"""
Language knowledge base access and primary language resolution.

The knowledge base is the language table bundled with gflanguages, keyed by
language id (e.g., "en_Latn", "ja_Jpan").
"""

from typing import Dict, Mapping, Optional
import logging

from gflanguages import LoadLanguages
from gfmetadata.fonts_public_pb2 import FamilyProto
from gfmetadata.languages_public_pb2 import LanguageProto

from .errors import MissingFallbackLanguageError

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en_Latn"


def load_languages() -> Dict[str, LanguageProto]:
    """Load the language table bundled with gflanguages."""
    return LoadLanguages()


def most_populous_language(
    languages: Mapping[str, LanguageProto],
    script: str,
) -> Optional[LanguageProto]:
    """
    Find the language with the highest population written in a script.

    On equal population the language seen last wins.
    """
    best = None
    for lang in languages.values():
        if not lang.HasField("script") or lang.script != script:
            continue
        if best is None or not best.population > lang.population:
            best = lang
    return best


def primary_language(
    family: FamilyProto,
    languages: Mapping[str, LanguageProto],
) -> LanguageProto:
    """
    Our best guess at the primary language for a family.

    Meant to be a good choice for things like rendering a sample string,
    not an authoritative mapping. The heuristic is:
    1. A declared primary_language that maps to a known language
    2. Otherwise, for a declared primary_script, the most populous
       language using that script
    3. Otherwise en_Latn

    Raises:
        MissingFallbackLanguageError: If en_Latn itself is unknown
    """
    if family.HasField("primary_language"):
        lang = languages.get(family.primary_language)
        if lang is not None:
            return lang
        logger.warning(
            f"{family.name} specifies invalid primary_language {family.primary_language}"
        )

    if family.HasField("primary_script"):
        lang = most_populous_language(languages, family.primary_script)
        if lang is not None:
            return lang
        logger.warning(
            f"{family.name} specifies a primary_script that matches no languages "
            f"{family.primary_script}"
        )

    lang = languages.get(FALLBACK_LANGUAGE)
    if lang is None:
        raise MissingFallbackLanguageError(family.name, FALLBACK_LANGUAGE)
    return lang
