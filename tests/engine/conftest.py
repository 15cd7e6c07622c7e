"""Shared fixtures for engine tests."""

from __future__ import annotations

import pytest

from crawlerinfo.engine.advice import CommonAdvice
from crawlerinfo.engine.types import Alternate, GoogleFeature, WebCrawlerInfo

DUMMY_CANONICAL = "http://dummy.canonical"


@pytest.fixture()
def full_info() -> WebCrawlerInfo:
    """Info with every field set."""

    return (
        WebCrawlerInfo()
        .with_canonical(DUMMY_CANONICAL)
        .with_advices(CommonAdvice.NO_ARCHIVE, CommonAdvice.NO_FOLLOW)
        .with_alternates(Alternate.alternate_language("de", DUMMY_CANONICAL))
        .with_description("dummy description")
        .with_keywords("dummy, keywords")
        .disable_google_features(GoogleFeature.TRANSLATION)
    )
