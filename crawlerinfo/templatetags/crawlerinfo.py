"""Template tags that write crawler info into the page head.

Usage::

    {% load crawlerinfo %}
    <head>{% web_crawler_info info style="XML_SELF_CLOSING_WITH_SPACE" %}</head>
"""

from __future__ import annotations

import logging

from django import template
from django.core.exceptions import ImproperlyConfigured
from django.utils.safestring import SafeString, mark_safe

from ..conf import get_default_info, get_style
from ..engine.config import void_element_style_for_name
from ..engine.render import WebCrawlerInfoRenderer
from ..engine.style import Style, VoidElementStyle
from ..engine.types import WebCrawlerInfo

logger = logging.getLogger(__name__)

register = template.Library()

_MISSING = object()


@register.simple_tag(takes_context=True)
def web_crawler_info(context, info=_MISSING, style=None) -> SafeString:
    """Render the head tags for ``info``.

    Without an explicit ``info`` the tag uses ``crawler_info`` from the
    context and then the configured default. ``None`` renders nothing, as
    does an undefined variable, which Django resolves to an empty string.
    """

    if info is _MISSING:
        info = context.get('crawler_info', _MISSING)
        if info is _MISSING:
            logger.debug('No crawler_info in context, using configured default')
            info = get_default_info()
    if info is None:
        return mark_safe('')
    if info == '':
        logger.debug('web_crawler_info got an undefined variable, rendering nothing')
        return mark_safe('')
    if not isinstance(info, WebCrawlerInfo):
        raise template.TemplateSyntaxError(
            f'web_crawler_info expects a WebCrawlerInfo, got {type(info).__name__}'
        )

    renderer = WebCrawlerInfoRenderer(_resolve_style(style))
    # Content values are escaped by the renderer itself.
    return mark_safe(renderer.render(info))


def _resolve_style(style) -> Style:
    if style is None or style == '':
        return get_style()
    if isinstance(style, Style):
        return style
    if isinstance(style, VoidElementStyle):
        return Style(style)
    try:
        return Style(void_element_style_for_name(style))
    except ValueError as exc:
        raise ImproperlyConfigured(str(exc)) from exc
