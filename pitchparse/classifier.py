"""
Keyword-based slide type classification.

A coarse bag-of-keywords scorer: each category owns a fixed keyword list,
and a slide scores one point per distinct keyword found anywhere in its
lower-cased content and title. False positives are expected; the result
is deterministic for a given keyword table.
"""

import logging
from typing import Dict, Optional, Tuple

from pitchparse.models import SlideType

logger = logging.getLogger(__name__)

# Iteration order breaks ties: the first category to reach the best score wins.
SLIDE_TYPE_KEYWORDS: Dict[SlideType, Tuple[str, ...]] = {
    "title": ("welcome", "introduction", "company", "startup", "founded", "mission"),
    "problem": ("problem", "challenge", "issue", "pain point", "difficulty", "struggle"),
    "solution": ("solution", "approach", "how we", "our product", "we solve", "innovation"),
    "market": ("market", "opportunity", "tam", "addressable market", "market size", "industry"),
    "business-model": ("business model", "revenue", "monetization", "pricing", "how we make money"),
    "traction": ("traction", "growth", "users", "customers", "revenue", "metrics", "kpis"),
    "team": ("team", "founders", "leadership", "experience", "background", "advisors"),
    "financials": ("financials", "projections", "forecast", "budget", "expenses", "profit"),
    "funding": ("funding", "investment", "raise", "capital", "investors", "valuation"),
    "competition": ("competition", "competitors", "competitive", "vs", "comparison", "differentiation"),
}

SLIDE_TYPE_LABELS: Dict[SlideType, str] = {
    "title": "Title Slide",
    "problem": "Problem Statement",
    "solution": "Solution",
    "market": "Market Opportunity",
    "business-model": "Business Model",
    "traction": "Traction",
    "team": "Team",
    "financials": "Financials",
    "funding": "Funding Ask",
    "competition": "Competition",
    "other": "Other",
}


def score_slide_types(content: str, title: Optional[str] = None) -> Dict[SlideType, int]:
    """Count distinct keyword hits per category, in table order."""
    haystack = f"{content.lower()} {(title or '').lower()}"
    return {
        slide_type: sum(1 for keyword in keywords if keyword in haystack)
        for slide_type, keywords in SLIDE_TYPE_KEYWORDS.items()
    }


def classify_slide_type(content: str, title: Optional[str] = None) -> SlideType:
    """
    Assign exactly one category to a slide.

    Args:
        content: Slide text
        title: Detected slide title, if any

    Returns:
        The category with the strictly highest score, or "other" when no
        keyword matches at all
    """
    best_type: SlideType = "other"
    best_score = 0
    for slide_type, score in score_slide_types(content, title).items():
        if score > best_score:
            best_type, best_score = slide_type, score

    logger.debug("Classified as %s (score=%d)", best_type, best_score)
    return best_type
