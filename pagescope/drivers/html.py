"""
Static HTML driver for pagescope.

Parses markup with lxml and answers lookups against the parsed tree. Handles
are lxml elements. There is no JavaScript engine and no frame support, so
script and frame operations raise NotImplementedError. It suits unit tests
and checks of server-rendered pages.
"""

from __future__ import annotations

import re
from contextlib import AbstractContextManager
from typing import Any

from lxml import html
from lxml.cssselect import CSSSelector
from lxml.etree import XPath, _Element

from pagescope.interfaces import BaseDriver

# Elements that never render content
_NON_RENDERED_TAGS = frozenset({"head", "script", "style", "template", "noscript"})

# Leading absolute step, possibly inside opening parentheses
_ABSOLUTE_XPATH = re.compile(r"^(\s*\(*\s*)/")


def _is_xpath(selector: str) -> bool:
    return selector.startswith(("/", "./", "(")) or selector.startswith("x:")


def _style_hides(style: str) -> bool:
    compact = style.replace(" ", "").lower()
    return "display:none" in compact or "visibility:hidden" in compact


class HtmlDriver(BaseDriver):
    """Driver over a parsed HTML document.

    Selectors are CSS unless they look like XPath (start with ``/``, ``./``
    or ``(``, or carry an explicit ``x:`` prefix). Absolute XPath is anchored
    at the search root so lookups never escape it.

    Example:
        driver = HtmlDriver.from_html("<ul><li>a</li><li>b</li></ul>")
        items = driver.find_all("li", driver.document)
    """

    def __init__(self, document: _Element, url: str = "about:blank") -> None:
        """Initialize HtmlDriver.

        Args:
            document: Root element of the parsed document.
            url: URL reported as the current URL.
        """
        self._document = document
        self._url = url

    @classmethod
    def from_html(cls, markup: str, url: str = "about:blank") -> "HtmlDriver":
        """Create a driver from an HTML string.

        Args:
            markup: HTML document.
            url: URL reported as the current URL.

        Returns:
            HtmlDriver over the parsed document.
        """
        return cls(html.document_fromstring(markup), url=url)

    @property
    def document(self) -> _Element:
        return self._document

    @property
    def current_url(self) -> str:
        return self._url

    def find_all(self, selector: str, root: Any) -> list[_Element]:
        if _is_xpath(selector):
            expression = selector[2:] if selector.startswith("x:") else selector
            expression = _ABSOLUTE_XPATH.sub(r"\1./", expression)
            matches = XPath(expression)(root)
        else:
            matches = CSSSelector(selector)(root)
        return [el for el in matches if isinstance(el, _Element) and el is not root]

    def is_visible(self, handle: Any) -> bool:
        """Check visibility from markup alone.

        A node is hidden when it or any ancestor carries the ``hidden``
        attribute, an inline ``display: none`` or ``visibility: hidden``
        style, or is a non-rendered tag such as ``<head>``.
        """
        node = handle
        while node is not None:
            if node.get("hidden") is not None:
                return False
            if _style_hides(node.get("style", "")):
                return False
            if isinstance(node.tag, str) and node.tag.lower() in _NON_RENDERED_TAGS:
                return False
            node = node.getparent()
        return True

    def execute_script(self, script: str, *args: Any) -> None:
        raise NotImplementedError("HtmlDriver cannot execute JavaScript")

    def evaluate_script(self, script: str, *args: Any) -> Any:
        raise NotImplementedError("HtmlDriver cannot evaluate JavaScript")

    def within_frame(self, frame: Any) -> AbstractContextManager[Any]:
        raise NotImplementedError("HtmlDriver does not support frames")

    def __repr__(self) -> str:
        return f"<HtmlDriver url={self._url!r}>"


__all__ = [
    "HtmlDriver",
]
