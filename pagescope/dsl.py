"""
Declarative element and section accessors.

Descriptors declared in a page or section class body. Each access performs
a fresh lookup beneath the owning node; nothing is memoized.

Example:
    class Header(Section):
        logo = Element("img.logo")
        links = Elements("nav a")

    class HomePage(Page):
        header = SectionField(Header, "header")
        cards = SectionList(Card, ".card")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional

from pagescope.exceptions import UsageError

if TYPE_CHECKING:
    from pagescope.node import Node
    from pagescope.section import Section


class DeclaredItem(ABC):
    """Base descriptor for a named, selector-backed accessor."""

    def __init__(self, selector: str) -> None:
        self._selector = selector
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @property
    def selector(self) -> str:
        """Get the selector this item is found by."""
        return self._selector

    def __get__(self, node: Optional["Node"], owner: Optional[type] = None) -> Any:
        if node is None:
            return self
        return self.resolve(node)

    @abstractmethod
    def resolve(self, node: "Node") -> Any:
        """Look the item up beneath ``node``."""
        ...

    def is_present(self, node: "Node") -> bool:
        """Check whether the item exists beneath ``node``."""
        return node.has_selector(self.selector)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}={self.selector!r}>"


class Element(DeclaredItem):
    """A single element; access raises ElementNotFoundError when missing."""

    def resolve(self, node: "Node") -> Any:
        return node.find(self.selector)


class Elements(DeclaredItem):
    """All matching elements; access returns a possibly empty list."""

    def resolve(self, node: "Node") -> list[Any]:
        return node.find_all(self.selector)


class _SectionItem(DeclaredItem):
    def __init__(self, section_cls: type["Section"], selector: Optional[str]) -> None:
        if selector is None:
            selector = section_cls.default_search_arguments()
        if selector is None:
            raise UsageError(
                f"{section_cls.__name__} has no default search arguments; "
                "pass a selector when declaring it"
            )
        super().__init__(selector)
        self.section_cls = section_cls


class SectionField(_SectionItem):
    """A single section rooted at the first match."""

    def __init__(
        self,
        section_cls: type["Section"],
        selector: Optional[str] = None,
        block: Optional[Callable[["Section"], Any]] = None,
    ) -> None:
        super().__init__(section_cls, selector)
        self.block = block

    def resolve(self, node: "Node") -> "Section":
        return self.section_cls(node, node.find(self.selector), self.block)


class SectionList(_SectionItem):
    """One section per match."""

    def __init__(
        self,
        section_cls: type["Section"],
        selector: Optional[str] = None,
    ) -> None:
        super().__init__(section_cls, selector)

    def resolve(self, node: "Node") -> list["Section"]:
        return [self.section_cls(node, root) for root in node.find_all(self.selector)]


__all__ = [
    "DeclaredItem",
    "Element",
    "Elements",
    "SectionField",
    "SectionList",
]
