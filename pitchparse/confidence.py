"""
Structural confidence for an extracted slide, on a 0-100 integer scale.
"""

from typing import List, Optional

from pitchparse.models import SlideType

BASE_CONFIDENCE = 50


def calculate_confidence(
    lines: List[str],
    title: Optional[str] = None,
    bullet_points: Optional[List[str]] = None,
    slide_type: Optional[SlideType] = None,
) -> int:
    """
    Score how cleanly a slide's structure was recovered.

    Starts from a neutral 50 and adds or subtracts fixed amounts for a
    usable title, bullet structure, line count and a resolved type.
    Measures extraction quality, not whether the content is any good.

    Args:
        lines: Trimmed, non-empty lines of the slide
        title: Detected title
        bullet_points: Extracted bullet items
        slide_type: Classifier result

    Returns:
        Confidence clamped to [0, 100]
    """
    confidence = BASE_CONFIDENCE

    if title and 3 < len(title) < 60:
        confidence += 20

    if bullet_points:
        confidence += 15

    if 3 <= len(lines) <= 20:
        confidence += 10

    if slide_type and slide_type != "other":
        confidence += 15

    if len(lines) < 2:
        confidence -= 20
    elif len(lines) > 30:
        confidence -= 10

    return max(0, min(100, confidence))
