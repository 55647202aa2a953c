"""
Font selection heuristics.

Picks the font file from a family that best matches a style and weight
preference. The exemplar is the font most likely to be a representative
choice for the family: normal style, weight as close to 400 as possible,
variable if present.
"""

from enum import Enum
from functools import reduce
from typing import Optional

from gfmetadata.fonts_public_pb2 import FamilyProto, FontProto


class FontStyle(Enum):
    """Font style preference for font selection."""
    NORMAL = "normal"
    ITALIC = "italic"


def font_score(font: FontProto, preferred_style: FontStyle, preferred_weight: int) -> int:
    """
    Score a font against a style and weight preference. Higher is better.

    Args:
        font: Candidate font
        preferred_style: Style to prefer
        preferred_weight: Weight to prefer (e.g., 400)

    Returns:
        Integer score
    """
    score = 0
    # prefer preferred_style
    if font.style == preferred_style.value:
        score += 16

    # prefer closer to preferred_weight, in steps of 100
    score -= abs(font.weight - preferred_weight) // 100

    # prefer more weight to less weight
    if font.weight > preferred_weight:
        score += 1

    # prefer variable, e.g. Family[wght].ttf
    if "]." in font.filename:
        score += 2

    return score


def select_font(
    family: FamilyProto,
    preferred_style: FontStyle,
    preferred_weight: int,
) -> Optional[FontProto]:
    """
    Select the best matching font from a family.

    On equal scores the font listed first in the family wins.

    Returns:
        The best font, or None if the family has no fonts
    """
    def score(font: FontProto) -> int:
        return font_score(font, preferred_style, preferred_weight)

    if not family.fonts:
        return None
    return reduce(lambda acc, e: acc if score(acc) >= score(e) else e, family.fonts)


def exemplar(family: FamilyProto) -> Optional[FontProto]:
    """Pick the exemplar font of a family."""
    return select_font(family, FontStyle.NORMAL, 400)
