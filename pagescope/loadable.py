"""
Load validation for pagescope pages and sections.

Every :class:`Loadable` class owns an ordered list of load validations. A
validation is a callable taking the node and returning either a bool or a
``(passed, reason)`` pair. The full list for a class is its ancestors' lists
(base class first) followed by its own.

Example:
    class SearchPage(Page):
        pass

    @SearchPage.register_validation
    def has_results(page):
        return page.has_selector(".result"), "no search results rendered"

    SearchPage(session).run_when_loaded(lambda page: page.find(".result"))
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, TypeVar, Union

from pagescope.config.settings import default_load_validations
from pagescope.exceptions import NO_REASON_SPECIFIED, NotLoadedError, UsageError
from pagescope.log import get_logger

T = TypeVar("T")
ValidationResult = Union[bool, tuple[bool, str]]
Validation = Callable[[Any], ValidationResult]


class LoadState(str, Enum):
    """Cached outcome of a load check."""

    UNKNOWN = "unknown"
    LOADED = "loaded"
    NOT_LOADED = "not_loaded"


# Stands for the default validation in an own list until collected
_DEFAULT_SLOT: Any = object()


class ValidationRegistry:
    """Per-class validation lists keyed by class identity.

    Own lists are materialized lazily. The top-most class of a hierarchy
    that declares ``default_load_validation`` is seeded with a slot for it
    when its list is first materialized, provided the process-wide switch
    is on at that moment. The list is then fixed until :meth:`reset`. The
    slot resolves to the most derived ``default_load_validation`` of the
    class being collected, so an override replaces the default instead of
    adding a second one.
    """

    def __init__(self) -> None:
        self._own: dict[type, list[Validation]] = {}

    def own(self, cls: type) -> list[Validation]:
        """Get the validations registered directly on ``cls``."""
        validations = self._own.get(cls)
        if validations is None:
            validations = []
            if self._seeds_default(cls) and default_load_validations():
                validations.append(_DEFAULT_SLOT)
            self._own[cls] = validations
        return validations

    def _seeds_default(self, cls: type) -> bool:
        declaring = [
            k for k in self.ancestors(cls) if "default_load_validation" in vars(k)
        ]
        return bool(declaring) and declaring[0] is cls

    def register(self, cls: type, predicate: Validation) -> None:
        """Append a validation to ``cls``'s own list."""
        self.own(cls).append(predicate)

    @staticmethod
    def ancestors(klass: type) -> list[type]:
        """Get the loadable classes of ``klass``'s hierarchy, base first."""
        return [k for k in reversed(klass.__mro__) if issubclass(k, Loadable)]

    def collect(self, cls: type) -> list[Validation]:
        """Get the full ordered validation list for ``cls``."""
        validations: list[Validation] = []
        for klass in self.ancestors(cls):
            validations.extend(self.own(klass))
        return [
            getattr(cls, "default_load_validation") if v is _DEFAULT_SLOT else v
            for v in validations
        ]

    def reset(self, cls: Optional[type] = None) -> None:
        """Forget materialized lists for one class, or for all classes."""
        if cls is None:
            self._own.clear()
        else:
            self._own.pop(cls, None)


registry = ValidationRegistry()


def _evaluate(validation: Validation, node: Any) -> tuple[bool, Optional[str]]:
    result = validation(node)
    if isinstance(result, tuple):
        passed = bool(result[0]) if result else False
        reason = result[1] if len(result) > 1 else None
        return passed, reason
    return bool(result), None


class Loadable:
    """Mixin adding load validations to a node class.

    The load state is cached per instance. :meth:`run_when_loaded` checks it
    once per outermost call; nested calls on the same instance reuse the
    cached answer.
    """

    _load_state: LoadState = LoadState.UNKNOWN
    _load_error: Optional[str] = None
    _in_guarded_block: bool = False
    _preseeded: bool = False

    # Class-level registration

    @classmethod
    def register_validation(cls, predicate: Callable[..., T]) -> Callable[..., T]:
        """Register a load validation on this class.

        Can be used as a decorator.

        Args:
            predicate: Callable taking the node and returning a bool or a
                ``(passed, reason)`` pair.

        Returns:
            The predicate, unchanged.
        """
        registry.register(cls, predicate)
        return predicate

    @classmethod
    def all_validations(cls) -> list[Validation]:
        """Get inherited validations followed by this class's own."""
        return registry.collect(cls)

    @classmethod
    def reset_validations(cls) -> None:
        """Forget this class's own validation list.

        The next query materializes it again, re-reading the default
        validation switch.
        """
        registry.reset(cls)

    # Instance state

    @property
    def loaded(self) -> Optional[bool]:
        """Get the cached load state: None when unknown."""
        if self._load_state is LoadState.UNKNOWN:
            return None
        return self._load_state is LoadState.LOADED

    @loaded.setter
    def loaded(self, value: Optional[bool]) -> None:
        """Pre-seed the load cache, bypassing validations while set."""
        if value is None:
            self.reset_load_state()
        else:
            self._load_state = LoadState.LOADED if value else LoadState.NOT_LOADED
            self._load_error = None
            self._preseeded = True

    @property
    def load_state(self) -> LoadState:
        """Get the cached load state."""
        return self._load_state

    @property
    def load_error(self) -> Optional[str]:
        """Get the reason the last load check failed."""
        if self._load_state is not LoadState.NOT_LOADED:
            return None
        return self._load_error or NO_REASON_SPECIFIED

    def reset_load_state(self) -> None:
        """Clear the cached load state and failure reason."""
        self._load_state = LoadState.UNKNOWN
        self._load_error = None
        self._preseeded = False

    # Checks

    def is_loaded(self) -> bool:
        """Check whether all load validations pass.

        Returns the cached answer when there is one. Otherwise validations
        run in order and evaluation stops at the first failure.
        """
        if self._load_state is not LoadState.UNKNOWN:
            return self._load_state is LoadState.LOADED

        for validation in self.all_validations():
            passed, reason = _evaluate(validation, self)
            if not passed:
                self._load_state = LoadState.NOT_LOADED
                self._load_error = reason
                get_logger(__name__).debug(
                    "%s failed to load: %s",
                    type(self).__name__,
                    reason or NO_REASON_SPECIFIED,
                )
                return False

        self._load_state = LoadState.LOADED
        self._load_error = None
        return True

    def run_when_loaded(self, block: Optional[Callable[[Any], T]] = None) -> T:
        """Run ``block(self)`` once load validations pass.

        A passing result is forgotten when the outermost call returns, so
        the next call validates again. A failing result is kept: later calls
        raise without re-running validations until :meth:`reset_load_state`
        is called (or ``loaded`` is set to None). Reset before retrying a
        page that may have finished loading since.

        Args:
            block: Callable receiving this node.

        Returns:
            Whatever ``block`` returns.

        Raises:
            UsageError: If no block is given.
            NotLoadedError: If a validation fails.
        """
        if block is None:
            raise UsageError("A block was expected, but none received.")

        if self._in_guarded_block:
            return block(self)

        self._in_guarded_block = True
        try:
            if not self.is_loaded():
                raise NotLoadedError(self._load_error)
            return block(self)
        finally:
            self._in_guarded_block = False
            if self._load_state is LoadState.LOADED and not self._preseeded:
                self._load_state = LoadState.UNKNOWN


__all__ = [
    "LoadState",
    "Loadable",
    "Validation",
    "ValidationRegistry",
    "registry",
]
