"""
Exception hierarchy for pagescope.
"""

from __future__ import annotations

from typing import Optional

NO_REASON_SPECIFIED = "No reason specified"


class PageScopeError(Exception):
    """Base class for all pagescope errors."""

    pass


class UsageError(PageScopeError, TypeError):
    """An API was called incorrectly (e.g. a required block is missing)."""

    pass


class NotLoadedError(PageScopeError):
    """Load validations failed for a page or section.

    Attributes:
        reason: Reason supplied by the failing validation, if any.
    """

    def __init__(self, reason: Optional[str] = None) -> None:
        self.reason = reason
        if reason is None:
            message = f"Failed to load - {NO_REASON_SPECIFIED}."
        else:
            message = f"Failed to load. Reason: {reason}."
        super().__init__(message)


class ElementNotFoundError(PageScopeError, LookupError):
    """No element matched a selector beneath the search root."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"Unable to find element: {selector}")


class ParentChainError(PageScopeError):
    """A section's parent chain does not end at a Page."""

    pass


class ConfigurationError(PageScopeError):
    """Configuration loading or parsing error."""

    pass


__all__ = [
    "NO_REASON_SPECIFIED",
    "PageScopeError",
    "UsageError",
    "NotLoadedError",
    "ElementNotFoundError",
    "ParentChainError",
    "ConfigurationError",
]
