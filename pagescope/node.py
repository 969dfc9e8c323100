"""
Common behaviour of pages and sections.

A node searches beneath a root: the session's current search scope for a
page, the root element for a section. The finder methods here resolve that
root on every call, so a page used inside ``section.within()`` picks up the
narrowed scope.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ContextManager

from pagescope.dsl import DeclaredItem
from pagescope.loadable import Loadable

if TYPE_CHECKING:
    from pagescope.session import Session


class Node(Loadable, ABC):
    """Base class for :class:`~pagescope.page.Page` and
    :class:`~pagescope.section.Section`.

    Subclasses provide ``session`` and :meth:`search_root`.
    """

    session: "Session"

    @abstractmethod
    def search_root(self) -> Any:
        """Get the handle lookups on this node search beneath."""
        ...

    # Finders

    def find(self, selector: str) -> Any:
        """Find the first node matching ``selector`` beneath this node.

        Raises:
            ElementNotFoundError: If nothing matches.
        """
        return self.session.find(selector, root=self.search_root())

    def find_all(self, selector: str) -> list[Any]:
        """Find all nodes matching ``selector`` beneath this node."""
        return self.session.find_all(selector, root=self.search_root())

    def has_selector(self, selector: str) -> bool:
        """Check whether ``selector`` matches beneath this node."""
        return self.session.has_selector(selector, root=self.search_root())

    def has_no_selector(self, selector: str) -> bool:
        """Check whether ``selector`` matches nothing beneath this node."""
        return not self.has_selector(selector)

    # Declared items

    @classmethod
    def declared_items(cls) -> dict[str, DeclaredItem]:
        """Get the elements and sections declared on this class and its bases."""
        items: dict[str, DeclaredItem] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, DeclaredItem):
                    items[name] = value
        return items

    def elements_present(self) -> list[str]:
        """Get the names of declared items currently present."""
        return [
            name
            for name, item in self.declared_items().items()
            if item.is_present(self)
        ]

    def all_there(self) -> bool:
        """Check whether every declared element and section is present."""
        return all(item.is_present(self) for item in self.declared_items().values())

    # Session-global operations

    def execute_script(self, script: str, *args: Any) -> None:
        """Execute JavaScript in the current browsing context."""
        return self.session.execute_script(script, *args)

    def evaluate_script(self, script: str, *args: Any) -> Any:
        """Evaluate JavaScript and return the result."""
        return self.session.evaluate_script(script, *args)

    def within_frame(self, frame: Any) -> ContextManager[Any]:
        """Switch into a frame for the duration of a ``with`` block."""
        return self.session.within_frame(frame)


__all__ = [
    "Node",
]
