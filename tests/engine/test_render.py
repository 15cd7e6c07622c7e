"""Renderer output tests."""

from __future__ import annotations

import io

import pytest
from bs4 import BeautifulSoup

from crawlerinfo.engine.advice import CommonAdvice, ImplicitAdvice, implicit_advices_and
from crawlerinfo.engine.render import WebCrawlerInfoRenderer, escape, render
from crawlerinfo.engine.style import Style, VoidElementStyle
from crawlerinfo.engine.types import Alternate, GoogleFeature, WebCrawlerInfo

CHARACTERS_TO_ESCAPE = "<>\"&'"
ESCAPED_CHARACTERS_TO_ESCAPE = "&lt;&gt;&quot;&amp;&apos;"
DUMMY_CANONICAL = "http://dummy.canonical"
DUMMY_TEXT = "dummy text"


def test_writes_nothing_for_empty_info():
    assert render(WebCrawlerInfo()) == ""


def test_writes_canonical():
    info = WebCrawlerInfo().with_canonical(DUMMY_CANONICAL)
    assert render(info) == '<link rel="canonical" href="http://dummy.canonical">'


def test_does_not_escape_canonical():
    info = WebCrawlerInfo().with_canonical("http://x/?a=1&b=2")
    assert render(info) == '<link rel="canonical" href="http://x/?a=1&b=2">'


def test_writes_description():
    info = WebCrawlerInfo().with_description(DUMMY_TEXT)
    assert render(info) == '<meta name="description" content="dummy text">'


def test_escapes_characters_in_description():
    info = WebCrawlerInfo().with_description(CHARACTERS_TO_ESCAPE)
    assert render(info) == f'<meta name="description" content="{ESCAPED_CHARACTERS_TO_ESCAPE}">'


def test_escapes_characters_in_keywords():
    info = WebCrawlerInfo().with_keywords(CHARACTERS_TO_ESCAPE)
    assert render(info) == f'<meta name="keywords" content="{ESCAPED_CHARACTERS_TO_ESCAPE}">'


def test_writes_empty_description():
    assert render(WebCrawlerInfo().with_description("")) == '<meta name="description" content="">'


def test_writes_single_advice():
    info = WebCrawlerInfo().with_advices(CommonAdvice.NO_ARCHIVE)
    assert render(info) == '<meta name="robots" content="noarchive">'


def test_writes_two_advices_separated_by_comma():
    info = WebCrawlerInfo().with_advices(CommonAdvice.NO_ARCHIVE, CommonAdvice.NO_FOLLOW)
    assert render(info) == '<meta name="robots" content="noarchive, nofollow">'


def test_writes_resolved_implicit_advices():
    info = WebCrawlerInfo().with_advices(*implicit_advices_and([CommonAdvice.NO_FOLLOW]))
    assert render(info) == '<meta name="robots" content="nofollow, index">'


def test_writes_two_alternates():
    info = WebCrawlerInfo().with_alternates(
        Alternate.alternate_language("de", DUMMY_CANONICAL),
        Alternate.alternate_language("en", DUMMY_CANONICAL + ".en"),
    )
    assert render(info) == (
        '<link rel="alternate" hreflang="de" href="http://dummy.canonical">'
        '<link rel="alternate" hreflang="en" href="http://dummy.canonical.en">'
    )


def test_writes_alternate_without_language():
    info = WebCrawlerInfo().with_alternates(Alternate(DUMMY_CANONICAL))
    assert render(info) == '<link rel="alternate" href="http://dummy.canonical">'


def test_writes_media_of_alternate():
    info = WebCrawlerInfo().with_alternates(
        Alternate.alternate_media("only screen and (max-width: 640px)", "http://m.dummy")
    )
    assert render(info) == (
        '<link rel="alternate" media="only screen and (max-width: 640px)" href="http://m.dummy">'
    )


def test_writes_language_before_media_of_alternate():
    info = WebCrawlerInfo().with_alternates(Alternate("h", "de", "m"))
    assert render(info) == '<link rel="alternate" hreflang="de" media="m" href="h">'


def test_writes_meta_tags_for_disabled_google_features():
    info = WebCrawlerInfo().disable_google_features(GoogleFeature.SITELINKS_SEARCH_BOX, GoogleFeature.TRANSLATION)
    assert render(info) == (
        '<meta name="google" content="nositelinkssearchbox">'
        '<meta name="google" content="notranslate">'
    )


def test_writes_tags_in_fixed_order(full_info):
    assert render(full_info) == (
        '<link rel="canonical" href="http://dummy.canonical">'
        '<meta name="robots" content="noarchive, nofollow">'
        '<link rel="alternate" hreflang="de" href="http://dummy.canonical">'
        '<meta name="description" content="dummy description">'
        '<meta name="keywords" content="dummy, keywords">'
        '<meta name="google" content="notranslate">'
    )


@pytest.mark.parametrize(
    ("void_element_style", "expected"),
    [
        (VoidElementStyle.HTML_VOID, '<link rel="canonical" href="http://dummy.canonical">'),
        (VoidElementStyle.XML_SELF_CLOSING_WITH_SPACE, '<link rel="canonical" href="http://dummy.canonical" />'),
        (VoidElementStyle.XML_SELF_CLOSING_WITHOUT_SPACE, '<link rel="canonical" href="http://dummy.canonical"/>'),
    ],
)
def test_writes_tag_with_configured_void_element_style(void_element_style, expected):
    info = WebCrawlerInfo().with_canonical(DUMMY_CANONICAL)
    style = Style().with_void_element_style(void_element_style)
    assert WebCrawlerInfoRenderer(style).render(info) == expected
    assert render(info, style) == expected


def test_style_applies_to_meta_tags():
    info = WebCrawlerInfo().with_keywords("a").disable_google_features(GoogleFeature.TRANSLATION)
    style = Style().with_void_element_style(VoidElementStyle.XML_SELF_CLOSING_WITH_SPACE)
    assert render(info, style) == (
        '<meta name="keywords" content="a" /><meta name="google" content="notranslate" />'
    )


def test_write_tags_streams_to_writer(full_info):
    buffer = io.StringIO()
    WebCrawlerInfoRenderer().write_tags(full_info, buffer)
    assert buffer.getvalue() == render(full_info)


class _FailingWriter:
    def __init__(self, fail_after: int) -> None:
        self.written = []
        self.fail_after = fail_after

    def write(self, text: str) -> None:
        if len(self.written) >= self.fail_after:
            raise OSError("broken pipe")
        self.written.append(text)


def test_writer_failure_propagates_and_keeps_partial_output(full_info):
    writer = _FailingWriter(fail_after=3)
    with pytest.raises(OSError, match="broken pipe"):
        WebCrawlerInfoRenderer().write_tags(full_info, writer)
    assert "".join(writer.written) == "<link "


def test_escape_replaces_ampersand_first():
    assert escape("&lt;") == "&amp;lt;"
    assert escape(CHARACTERS_TO_ESCAPE) == ESCAPED_CHARACTERS_TO_ESCAPE


@pytest.mark.parametrize(
    "text",
    ["plain", CHARACTERS_TO_ESCAPE, "Tom & Jerry's \"<b>best</b>\"", "&amp; already escaped", ""],
)
def test_escaped_content_round_trips_through_html_parser(text):
    tags = render(WebCrawlerInfo().with_description(text))
    content = tags[len('<meta name="description" content="'):-len('">')]
    assert not any(character in content for character in "<>\"'")
    meta = BeautifulSoup(tags, "html.parser").find("meta")
    assert meta["content"] == text


def test_implicit_advice_label_is_rendered():
    info = WebCrawlerInfo().with_advices(ImplicitAdvice.INDEX)
    assert render(info) == '<meta name="robots" content="index">'
