"""
Abstract driver interface for pagescope.

Pages and sections never talk to a browser directly. They go through a
driver that can find nodes beneath a root, answer visibility questions and
run session-global operations such as scripts and frame switching. Element
handles are opaque to pagescope; only the driver interprets them.
"""

from abc import ABC, abstractmethod
from typing import Any, ContextManager

from pagescope.exceptions import ElementNotFoundError


class BaseDriver(ABC):
    """Abstract base class for the finder/driver collaborator.

    Implementations wrap a browser automation backend (or, for
    :class:`~pagescope.drivers.html.HtmlDriver`, a static HTML document).
    """

    @property
    @abstractmethod
    def document(self) -> Any:
        """Get the handle of the document root."""
        ...

    @property
    @abstractmethod
    def current_url(self) -> str:
        """Get the URL of the currently loaded document."""
        ...

    @abstractmethod
    def find_all(self, selector: str, root: Any) -> list[Any]:
        """Find all nodes matching a selector beneath a root.

        Args:
            selector: Selector string understood by the driver.
            root: Handle to search beneath. The root itself never matches.

        Returns:
            List of matching handles in document order.
        """
        ...

    def find(self, selector: str, root: Any) -> Any:
        """Find the first node matching a selector beneath a root.

        Args:
            selector: Selector string understood by the driver.
            root: Handle to search beneath.

        Returns:
            First matching handle.

        Raises:
            ElementNotFoundError: If nothing matches.
        """
        matches = self.find_all(selector, root)
        if not matches:
            raise ElementNotFoundError(selector)
        return matches[0]

    @abstractmethod
    def is_visible(self, handle: Any) -> bool:
        """Check whether a node is currently displayed."""
        ...

    @abstractmethod
    def execute_script(self, script: str, *args: Any) -> None:
        """Execute JavaScript in the current browsing context."""
        ...

    @abstractmethod
    def evaluate_script(self, script: str, *args: Any) -> Any:
        """Evaluate a JavaScript expression and return its result."""
        ...

    @abstractmethod
    def within_frame(self, frame: Any) -> ContextManager[Any]:
        """Switch into a frame for the duration of a ``with`` block.

        Args:
            frame: Frame handle, name or index.

        Returns:
            Context manager that restores the parent frame on exit.
        """
        ...


__all__ = [
    "BaseDriver",
]
