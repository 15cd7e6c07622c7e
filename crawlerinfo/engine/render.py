"""Serialise :class:`WebCrawlerInfo` into HTML head tags.

Tags are written in a fixed order: canonical link, robots meta, alternate
links, description meta, keywords meta and one ``google`` meta per disabled
feature. Only meta ``content`` values are escaped; ``href``, ``hreflang``
and ``media`` values are written verbatim.
"""

from __future__ import annotations

import io
from typing import Optional, Protocol, Sequence, Tuple

from .advice import Advice
from .style import DEFAULT_STYLE, Style
from .types import Alternate, GoogleFeature, WebCrawlerInfo

# "&" must come first so later entities are not escaped again.
REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

ADVICE_SEPARATOR = ", "


class Writer(Protocol):
    def write(self, text: str) -> object: ...


def escape(content: str) -> str:
    """Escape ``content`` for use inside a double-quoted attribute."""

    for character, sequence in REPLACEMENTS:
        content = content.replace(character, sequence)
    return content


class _TagWriter:
    """Writes tag fragments to a writer using the configured style."""

    def __init__(self, writer: Writer, style: Style) -> None:
        self.writer = writer
        self.style = style

    def start_tag(self, name: str) -> None:
        self.writer.write("<")
        self.writer.write(name)

    def write_attribute(self, name: str, value: str) -> None:
        self.writer.write(" ")
        self.writer.write(name)
        self.writer.write('="')
        self.writer.write(value)
        self.writer.write('"')

    def write_attribute_if_value_exists(self, name: str, value: Optional[str]) -> None:
        if value is not None:
            self.write_attribute(name, value)

    def write_meta_tag(self, name: str, content: str) -> None:
        self.start_tag("meta")
        self.write_attribute("name", name)
        self.write_attribute("content", escape(content))
        self.close_tag()

    def close_tag(self) -> None:
        self.writer.write(self.style.void_element_style.closing_suffix)


class WebCrawlerInfoRenderer:
    """Stateless renderer bound to a :class:`Style`.

    One instance can be shared between threads as long as every call
    supplies its own writer.
    """

    def __init__(self, style: Style = DEFAULT_STYLE) -> None:
        self.style = style

    def write_tags(self, info: WebCrawlerInfo, writer: Writer) -> None:
        """Write the tags for ``info`` to ``writer``.

        Errors raised by ``writer`` propagate; whatever was written before
        the failure stays written.
        """

        tags = _TagWriter(writer, self.style)
        if info.canonical is not None:
            _write_canonical(info.canonical, tags)
        if info.advices:
            tags.write_meta_tag("robots", join_advices(info.advices))
        for alternate in info.alternates:
            _write_alternate(alternate, tags)
        if info.description is not None:
            tags.write_meta_tag("description", info.description)
        if info.keywords is not None:
            tags.write_meta_tag("keywords", info.keywords)
        _write_disabled_google_features(info.disabled_google_features, tags)

    def render(self, info: WebCrawlerInfo) -> str:
        """Return the tags for ``info`` as a string."""

        buffer = io.StringIO()
        self.write_tags(info, buffer)
        return buffer.getvalue()


def render(info: WebCrawlerInfo, style: Style | None = None) -> str:
    """Render ``info`` with ``style`` or the default style."""

    return WebCrawlerInfoRenderer(style or DEFAULT_STYLE).render(info)


def join_advices(advices: Sequence[Advice]) -> str:
    return ADVICE_SEPARATOR.join(advice.label for advice in advices)


def _write_canonical(canonical: str, tags: _TagWriter) -> None:
    tags.start_tag("link")
    tags.write_attribute("rel", "canonical")
    tags.write_attribute("href", canonical)
    tags.close_tag()


def _write_alternate(alternate: Alternate, tags: _TagWriter) -> None:
    tags.start_tag("link")
    tags.write_attribute("rel", "alternate")
    tags.write_attribute_if_value_exists("hreflang", alternate.language)
    tags.write_attribute_if_value_exists("media", alternate.media)
    tags.write_attribute("href", alternate.href)
    tags.close_tag()


def _write_disabled_google_features(features: Sequence[GoogleFeature], tags: _TagWriter) -> None:
    for feature in features:
        tags.write_meta_tag("google", feature.label_for_disabling)
