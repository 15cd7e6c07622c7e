"""Template context processors for the crawlerinfo app."""

from __future__ import annotations

from typing import Dict

from django.http import HttpRequest

from .conf import get_default_info
from .engine.types import WebCrawlerInfo


def web_crawler_info(request: HttpRequest) -> Dict[str, WebCrawlerInfo]:
    """Expose the configured default info as ``crawler_info``."""

    return {'crawler_info': get_default_info()}
