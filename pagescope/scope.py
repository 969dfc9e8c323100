"""
Search scope for pagescope.

A :class:`SearchScope` answers "where do unqualified lookups search from".
It starts at the document root and is narrowed by pushing roots on a stack.
Pushes and pops only happen through :meth:`SearchScope.bind`, so nesting is
strictly stack-like and a root is never left behind when a block raises.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator


class SearchScope:
    """Stack of search roots bound to one document.

    Example:
        scope = SearchScope(document)
        with scope.bind(sidebar):
            assert scope.current is sidebar
        assert scope.current is document
    """

    def __init__(self, document: Any) -> None:
        """Initialize SearchScope.

        Args:
            document: Handle of the document root, used when nothing is bound.
        """
        self._document = document
        self._stack: list[Any] = []

    @property
    def document(self) -> Any:
        """Get the document root handle."""
        return self._document

    @property
    def current(self) -> Any:
        """Get the innermost bound root, or the document if none."""
        if self._stack:
            return self._stack[-1]
        return self._document

    @property
    def depth(self) -> int:
        """Get the number of roots currently bound."""
        return len(self._stack)

    @contextmanager
    def bind(self, root: Any) -> Iterator[Any]:
        """Bind ``root`` as the current search root for a ``with`` block.

        Args:
            root: Handle to search beneath.

        Yields:
            The bound root.
        """
        self._stack.append(root)
        try:
            yield root
        finally:
            self._stack.pop()

    def __repr__(self) -> str:
        return f"<SearchScope depth={self.depth}>"


__all__ = [
    "SearchScope",
]
