"""
Sections for pagescope.

A section is a region of a page rooted at one element. Its finders search
beneath that element, and :meth:`Section.within` narrows the session's
search scope to it so that code running inside the block, including page
lookups, stays within the region.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Union

from pagescope.exceptions import ParentChainError
from pagescope.log import get_logger
from pagescope.node import Node
from pagescope.page import Page

ParentNode = Union[Page, "Section"]


class Section(Node):
    """A scoped region of a page.

    Example:
        class SearchResult(Section):
            title = Element("h3")

        SearchResult.set_default_search_arguments(".result")

        class SearchPage(Page):
            results = SectionList(SearchResult)

        for result in SearchPage(session).results:
            print(result.title.text)
    """

    _default_search_arguments: Optional[str] = None

    def __init__(
        self,
        parent: ParentNode,
        root_element: Any,
        block: Optional[Callable[["Section"], Any]] = None,
    ) -> None:
        """Initialize Section.

        Args:
            parent: Page or section that contains this one.
            root_element: Handle lookups search beneath. May be None if the
                lookup that produced it failed.
            block: Optional callable run inside :meth:`within` before the
                constructor returns.

        Raises:
            ParentChainError: If ``parent``'s chain never reaches a Page.
        """
        self._parent = parent
        self._root_element = root_element
        self.parent_page()
        if block is not None:
            with self.within():
                block(self)

    @classmethod
    def set_default_search_arguments(cls, selector: str) -> None:
        """Set the selector used when this section is declared without one."""
        cls._default_search_arguments = selector

    @classmethod
    def default_search_arguments(cls) -> Optional[str]:
        """Get the default selector, inherited from base sections."""
        return cls._default_search_arguments

    @property
    def parent(self) -> ParentNode:
        """Get the containing page or section."""
        return self._parent

    @property
    def root_element(self) -> Any:
        """Get the handle this section is rooted at."""
        return self._root_element

    @property
    def session(self) -> Any:
        """Get the owning page's session."""
        return self.parent_page().session

    @property
    def native(self) -> Any:
        """Get the driver-native handle of the root element."""
        return self._root_element

    def parent_page(self) -> Page:
        """Walk up the parent chain to the owning page.

        Raises:
            ParentChainError: If the chain is cyclic or ends at a non-node.
        """
        seen = {id(self)}
        candidate: Any = self._parent
        while not isinstance(candidate, Page):
            if not isinstance(candidate, Section):
                raise ParentChainError(
                    f"{type(self).__name__} parent chain ends at "
                    f"{type(candidate).__name__}, not a Page"
                )
            if id(candidate) in seen:
                raise ParentChainError(
                    f"{type(self).__name__} parent chain is cyclic"
                )
            seen.add(id(candidate))
            candidate = candidate._parent
        return candidate

    def page_root(self) -> Any:
        """Get the root element, or the session's search root if missing."""
        if self._root_element is not None:
            return self._root_element
        get_logger(__name__).warning(
            "Root element not found for %s; falling back to the current search scope",
            type(self).__name__,
        )
        return self.session.current_scope()

    def search_root(self) -> Any:
        return self.page_root()

    @contextmanager
    def within(self) -> Iterator["Section"]:
        """Narrow the session's search scope to this section.

        Yields:
            This section.
        """
        with self.session.within(self.page_root()):
            yield self

    def visible(self) -> bool:
        """Check whether the section's root is displayed."""
        return self.session.is_visible(self.page_root())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} root={self._root_element!r}>"


__all__ = [
    "Section",
]
