"""Read crawler info configuration from Django settings."""

from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .engine.config import CrawlerInfoConfig, load_config, void_element_style_for_name
from .engine.style import Style
from .engine.types import WebCrawlerInfo


@lru_cache(maxsize=8)
def _load(path: str | None) -> CrawlerInfoConfig:
    return load_config(path)


def get_config() -> CrawlerInfoConfig:
    path = getattr(settings, 'CRAWLERINFO_CONFIG', None)
    return _load(str(path) if path else None)


def get_style() -> Style:
    """Return the configured style; the settings override wins over YAML."""

    override = getattr(settings, 'CRAWLERINFO_VOID_ELEMENT_STYLE', None)
    try:
        if override:
            return Style(void_element_style_for_name(override))
        return get_config().style()
    except ValueError as exc:
        raise ImproperlyConfigured(str(exc)) from exc


def get_default_info() -> WebCrawlerInfo:
    try:
        return get_config().default_info()
    except ValueError as exc:
        raise ImproperlyConfigured(str(exc)) from exc


def clear_cache() -> None:
    _load.cache_clear()
