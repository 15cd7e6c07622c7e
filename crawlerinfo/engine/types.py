"""Immutable values describing what crawlers should know about a page."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from .advice import Advice


class GoogleFeature(Enum):
    """Google features that a page can opt out of."""

    SITELINKS_SEARCH_BOX = "nositelinkssearchbox"
    TRANSLATION = "notranslate"

    @property
    def label_for_disabling(self) -> str:
        return self.value


@dataclass(frozen=True)
class Alternate:
    """Target of a ``<link rel="alternate">`` tag."""

    href: str
    language: Optional[str] = None
    media: Optional[str] = None

    @classmethod
    def alternate_language(cls, language: str, href: str) -> "Alternate":
        return cls(href=href, language=language)

    @classmethod
    def alternate_media(cls, media: str, href: str) -> "Alternate":
        return cls(href=href, media=media)


@dataclass(frozen=True)
class WebCrawlerInfo:
    """Head-section directives for web crawlers.

    Instances never change. Each ``with_*`` method returns a new instance
    with one field replaced, and sequence fields are stored as tuples so
    callers cannot mutate a shared instance. ``None`` marks an unset
    scalar field.
    """

    canonical: Optional[str] = None
    advices: Tuple[Advice, ...] = field(default_factory=tuple)
    alternates: Tuple[Alternate, ...] = field(default_factory=tuple)
    description: Optional[str] = None
    keywords: Optional[str] = None
    disabled_google_features: Tuple[GoogleFeature, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Freeze sequences handed to the constructor directly.
        object.__setattr__(self, "advices", tuple(self.advices))
        object.__setattr__(self, "alternates", tuple(self.alternates))
        object.__setattr__(self, "disabled_google_features", tuple(self.disabled_google_features))

    def with_canonical(self, canonical: Optional[str]) -> "WebCrawlerInfo":
        return replace(self, canonical=canonical)

    def with_advices(self, *advices: Advice) -> "WebCrawlerInfo":
        return replace(self, advices=advices)

    def with_alternates(self, *alternates: Alternate) -> "WebCrawlerInfo":
        return replace(self, alternates=alternates)

    def with_description(self, description: Optional[str]) -> "WebCrawlerInfo":
        return replace(self, description=description)

    def with_keywords(self, keywords: Optional[str]) -> "WebCrawlerInfo":
        return replace(self, keywords=keywords)

    def disable_google_features(self, *features: GoogleFeature) -> "WebCrawlerInfo":
        return replace(self, disabled_google_features=features)
