import re
from typing import List, Optional

from app.schemas.company import CompanyProfile

DESCRIPTION_TERMS = 20
TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")


def candidate_terms(profile: CompanyProfile) -> List[str]:
    terms: List[str] = []
    if profile.name:
        terms.append(profile.name.lower())
    terms.extend(a.lower() for a in profile.aliases)
    terms.extend(p.lower() for p in profile.products)
    if profile.description:
        words = [w for w in TOKEN_SPLIT.split(profile.description.lower()) if w]
        terms.extend(words[:DESCRIPTION_TERMS])
    return terms


def is_relevant(message: Optional[str], profile: Optional[CompanyProfile]) -> bool:
    """Plain substring match, not word-bounded: short terms like "ai" match inside other words."""
    if not profile or not message:
        return False
    text = message.lower()
    return any(term and term in text for term in candidate_terms(profile))


def should_include_company(message: Optional[str], profile: Optional[CompanyProfile], always_include: bool = False) -> bool:
    if not profile:
        return False
    return always_include or is_relevant(message, profile)
