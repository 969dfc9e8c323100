"""
Session for pagescope.

A :class:`Session` pairs a driver with the search scope that unqualified
lookups use. Pages hold a session; sections reach it through their parent
page, so every node of one page shares a single scope stack.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, ContextManager, Iterator, Optional

from pagescope.exceptions import ElementNotFoundError
from pagescope.interfaces import BaseDriver
from pagescope.scope import SearchScope


class Session:
    """Driver plus search scope.

    Example:
        session = Session(HtmlDriver.from_html(markup))
        with session.within(session.find("#sidebar")):
            links = session.find_all("a")  # only links inside the sidebar
    """

    def __init__(self, driver: BaseDriver) -> None:
        """Initialize Session.

        Args:
            driver: Driver used for all lookups and session-global operations.
        """
        self._driver = driver
        self._scope = SearchScope(driver.document)

    @property
    def driver(self) -> BaseDriver:
        """Get the underlying driver."""
        return self._driver

    @property
    def scope(self) -> SearchScope:
        """Get the search scope stack."""
        return self._scope

    @property
    def document(self) -> Any:
        """Get the document root handle."""
        return self._driver.document

    @property
    def current_url(self) -> str:
        """Get the URL of the current document."""
        return self._driver.current_url

    def current_scope(self) -> Any:
        """Get the root that unqualified lookups search beneath."""
        return self._scope.current

    @contextmanager
    def within(self, root: Any) -> Iterator[Any]:
        """Narrow unqualified lookups to ``root`` for a ``with`` block.

        Args:
            root: Handle to search beneath.

        Yields:
            The bound root.
        """
        with self._scope.bind(root):
            yield root

    # Finders

    def find(self, selector: str, root: Optional[Any] = None) -> Any:
        """Find the first node matching ``selector``.

        Args:
            selector: Selector string.
            root: Search root. Defaults to the current search scope.

        Returns:
            Matching handle.

        Raises:
            ElementNotFoundError: If nothing matches.
        """
        if root is None:
            root = self.current_scope()
        return self._driver.find(selector, root)

    def find_all(self, selector: str, root: Optional[Any] = None) -> list[Any]:
        """Find all nodes matching ``selector``.

        Args:
            selector: Selector string.
            root: Search root. Defaults to the current search scope.

        Returns:
            List of matching handles.
        """
        if root is None:
            root = self.current_scope()
        return self._driver.find_all(selector, root)

    def has_selector(self, selector: str, root: Optional[Any] = None) -> bool:
        """Check whether ``selector`` matches anything beneath the root."""
        try:
            self.find(selector, root)
        except ElementNotFoundError:
            return False
        return True

    def is_visible(self, handle: Any) -> bool:
        """Check whether a node is displayed."""
        return self._driver.is_visible(handle)

    # Session-global operations

    def execute_script(self, script: str, *args: Any) -> None:
        """Execute JavaScript in the current browsing context."""
        return self._driver.execute_script(script, *args)

    def evaluate_script(self, script: str, *args: Any) -> Any:
        """Evaluate JavaScript and return the result."""
        return self._driver.evaluate_script(script, *args)

    def within_frame(self, frame: Any) -> ContextManager[Any]:
        """Switch into a frame for the duration of a ``with`` block."""
        return self._driver.within_frame(frame)

    def __repr__(self) -> str:
        return f"<Session url={self.current_url!r} scope_depth={self._scope.depth}>"


__all__ = [
    "Session",
]
