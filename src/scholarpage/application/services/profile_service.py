from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from scholarpage.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class NavItem(BaseModel):
    label: str
    href: str


class FocusArea(BaseModel):
    title: str
    description: str = ""


class ContactLink(BaseModel):
    label: str
    href: str


class SiteProfile(BaseModel):
    name: str = "Your Name"
    role: str = "Researcher"
    headline: str = "Research at the intersection of methods and practice"
    tagline: str = ""
    about: list[str] = Field(default_factory=list)
    affiliations: list[str] = Field(default_factory=list)
    nav: list[NavItem] = Field(
        default_factory=lambda: [
            NavItem(label="Research", href="#about"),
            NavItem(label="Publications", href="#publications"),
            NavItem(label="Contact", href="#contact"),
        ]
    )
    focus_areas: list[FocusArea] = Field(default_factory=list)
    contact: list[ContactLink] = Field(default_factory=list)
    publications_intro: str = "Selected works from recent years."


def load_profile(profile_path: Path | None) -> SiteProfile:
    if profile_path is None:
        return SiteProfile()

    path = profile_path.expanduser().resolve()
    if not path.exists():
        logger.info("No profile file at %s; using defaults", path)
        return SiteProfile()

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Profile is not valid JSON: {path}: {exc}") from exc

    try:
        return SiteProfile.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid profile {path}: {exc}") from exc
