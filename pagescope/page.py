"""
Page objects for pagescope.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Optional

from pagescope.node import Node

if TYPE_CHECKING:
    from pagescope.session import Session


class Page(Node):
    """A whole screen of the application under test.

    Lookups search beneath the session's current search scope, which is the
    document unless a section has narrowed it.

    Example:
        class LoginPage(Page):
            url_matcher = r"/login$"
            username = Element("#username")
            submit = Element("button[type=submit]")

        page = LoginPage(session)
        page.run_when_loaded(lambda p: p.find("#username"))
    """

    url_matcher: Optional[str] = None

    def __init__(self, session: "Session") -> None:
        """Initialize Page.

        Args:
            session: Session the page reads from.
        """
        self.session = session

    def search_root(self) -> Any:
        """Get the session's current search root."""
        return self.session.current_scope()

    def displayed(self) -> bool:
        """Check whether this page is the one being shown.

        With a ``url_matcher`` the current URL must match it; otherwise the
        document itself must be visible.
        """
        if self.url_matcher is not None:
            return re.search(self.url_matcher, self.session.current_url) is not None
        return self.session.is_visible(self.session.document)

    def default_load_validation(self) -> tuple[bool, str]:
        """Built-in load validation seeded onto every page class."""
        return (
            self.displayed(),
            f"Expected {self.session.current_url} to be displayed as {type(self).__name__}",
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} url={self.session.current_url!r}>"


__all__ = [
    "Page",
]
