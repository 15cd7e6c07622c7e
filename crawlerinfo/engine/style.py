"""Output style for rendered tags."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class VoidElementStyle(Enum):
    """How void elements such as ``<link>`` and ``<meta>`` are terminated."""

    HTML_VOID = ">"
    XML_SELF_CLOSING_WITH_SPACE = " />"
    XML_SELF_CLOSING_WITHOUT_SPACE = "/>"

    @property
    def closing_suffix(self) -> str:
        return self.value


@dataclass(frozen=True)
class Style:
    """Formatting options applied by the renderer."""

    void_element_style: VoidElementStyle = VoidElementStyle.HTML_VOID

    def with_void_element_style(self, style: VoidElementStyle) -> "Style":
        return replace(self, void_element_style=style)


DEFAULT_STYLE = Style()
