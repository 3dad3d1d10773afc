import json
import logging
import os
from typing import Optional

from pydantic import ValidationError
from app.schemas.company import CompanyProfile
from app.utils.prompt_loader import load_prompt


logger = logging.getLogger(__name__)


class CompanyProfileStore:
    """Owns the current company profile.

    The profile is read-only between loads; ``reload`` simply replaces it.
    A missing or broken file disables context injection instead of failing.
    """

    def __init__(self, path: str):
        self.path = path
        self._profile: Optional[CompanyProfile] = None

    @property
    def profile(self) -> Optional[CompanyProfile]:
        return self._profile

    @property
    def loaded(self) -> bool:
        return self._profile is not None

    def load(self) -> Optional[CompanyProfile]:
        if not os.path.exists(self.path):
            logger.info("No company profile found at %s", self.path)
            self._profile = None
            return None
        try:
            with open(self.path, encoding="utf-8") as f:
                raw = json.load(f)
            self._profile = CompanyProfile.model_validate(raw)
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning("Could not load company profile %s: %s", self.path, exc)
            self._profile = None
            return None
        logger.info("Loaded company profile: %s", self._profile.name or "(unnamed)")
        return self._profile

    def reload(self) -> Optional[CompanyProfile]:
        return self.load()


def company_summary(profile: Optional[CompanyProfile]) -> str:
    if not profile:
        return ""
    parts = []
    if profile.name:
        parts.append(f"Name: {profile.name}")
    if profile.aliases:
        parts.append(f"Aliases: {', '.join(profile.aliases)}")
    if profile.website:
        parts.append(f"Website: {profile.website}")
    if profile.description:
        parts.append(f"Description: {profile.description}")
    if profile.products:
        parts.append(f"Products/Services: {', '.join(profile.products)}")
    if profile.location:
        parts.append(f"Location: {profile.location}")
    return "\n".join(parts)


def build_context_block(profile: CompanyProfile) -> str:
    return load_prompt("company_context.txt", summary=company_summary(profile))
