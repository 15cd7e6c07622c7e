"""Framework-free core: crawler info values, implicit advice and rendering."""

from .advice import Advice, CommonAdvice, CustomAdvice, ImplicitAdvice, advice_for_label, implicit_advices_and
from .render import WebCrawlerInfoRenderer, escape, render
from .style import DEFAULT_STYLE, Style, VoidElementStyle
from .types import Alternate, GoogleFeature, WebCrawlerInfo

__all__ = [
    "Advice",
    "Alternate",
    "CommonAdvice",
    "CustomAdvice",
    "DEFAULT_STYLE",
    "GoogleFeature",
    "ImplicitAdvice",
    "Style",
    "VoidElementStyle",
    "WebCrawlerInfo",
    "WebCrawlerInfoRenderer",
    "advice_for_label",
    "escape",
    "implicit_advices_and",
    "render",
]
