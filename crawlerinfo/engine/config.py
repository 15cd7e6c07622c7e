"""Configuration helpers for crawler info rendering."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .advice import advice_for_label, implicit_advices_and
from .style import Style, VoidElementStyle
from .types import Alternate, GoogleFeature, WebCrawlerInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrawlerInfoConfig:
    """Typed wrapper around the configuration dictionary."""

    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    def style(self) -> Style:
        return Style(void_element_style_for_name(self.raw.get("void_element_style", "HTML_VOID")))

    def default_info(self) -> WebCrawlerInfo:
        return info_from_mapping(self.raw.get("defaults") or {})


DEFAULTS: Dict[str, Any] = {
    "void_element_style": "HTML_VOID",
    "defaults": {
        "canonical": None,
        "advices": [],
        "alternates": [],
        "description": None,
        "keywords": None,
        "disabled_google_features": [],
        "include_implicit_advices": False,
    },
}


def load_config(path: str | Path | None = None) -> CrawlerInfoConfig:
    """Load configuration from YAML, merging with defaults."""

    data: Dict[str, Any] = copy.deepcopy(DEFAULTS)

    if path is not None and Path(path).exists():
        with Path(path).open("r", encoding="utf-8") as stream:
            user = yaml.safe_load(stream) or {}
        if not isinstance(user, dict):
            raise ValueError(
                f"Crawler info configuration {path} must be a mapping, got {type(user).__name__}"
            )
        merge_into(data, user)
        logger.info("Loaded crawler info configuration from %s", path)
    elif path is not None:
        logger.info("Crawler info configuration %s not found, using defaults", path)

    return CrawlerInfoConfig(data)


def merge_into(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge override into base dict."""

    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_into(base[key], value)
        else:
            base[key] = value


def void_element_style_for_name(name: str) -> VoidElementStyle:
    try:
        return VoidElementStyle[str(name).upper()]
    except KeyError:
        raise ValueError(f"Unknown void element style: {name!r}") from None


def google_feature_for_name(name: str) -> GoogleFeature:
    """Accept either the member name or the label used for disabling."""

    for feature in GoogleFeature:
        if name in (feature.name, feature.label_for_disabling):
            return feature
    raise ValueError(f"Unknown Google feature: {name!r}")


def _list_value(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ValueError(f"{key!r} must be a list, got {type(value).__name__}")
    return value


def _alternate_from_item(item: Any) -> Alternate:
    if isinstance(item, str):
        return Alternate(item)
    if not isinstance(item, dict):
        raise ValueError(f"'alternates' entries must be strings or mappings, got {type(item).__name__}")
    if not item.get("href"):
        raise ValueError(f"'alternates' entry is missing 'href': {item!r}")
    return Alternate(item["href"], item.get("language"), item.get("media"))


def info_from_mapping(data: Dict[str, Any]) -> WebCrawlerInfo:
    """Build a :class:`WebCrawlerInfo` from a plain mapping.

    Raises ``ValueError`` naming the offending key when the mapping has
    the wrong shape.
    """

    if not isinstance(data, dict):
        raise ValueError(f"'defaults' must be a mapping, got {type(data).__name__}")

    advices = [advice_for_label(str(label)) for label in _list_value(data, "advices")]
    if data.get("include_implicit_advices"):
        advices = implicit_advices_and(advices)

    alternates = [_alternate_from_item(item) for item in _list_value(data, "alternates")]
    features = [google_feature_for_name(name) for name in _list_value(data, "disabled_google_features")]

    return (
        WebCrawlerInfo()
        .with_canonical(data.get("canonical"))
        .with_advices(*advices)
        .with_alternates(*alternates)
        .with_description(data.get("description"))
        .with_keywords(data.get("keywords"))
        .disable_google_features(*features)
    )
