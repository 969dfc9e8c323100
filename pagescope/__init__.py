"""
pagescope: page objects with load validation and scoped sections.

Declare pages and sections as classes, check that they are loaded before
acting on them, and let sections narrow every lookup to their own subtree.

Basic usage:
    from pagescope import Element, Page, Section, SectionField, Session
    from pagescope.drivers import HtmlDriver

    class Results(Section):
        items = Elements("li")

    class SearchPage(Page):
        url_matcher = r"/search"
        results = SectionField(Results, "#results")

    session = Session(HtmlDriver.from_html(markup, url="https://example.com/search"))
    page = SearchPage(session)
    page.run_when_loaded(lambda p: p.results.items)

Load validations:
    @SearchPage.register_validation
    def has_results(page):
        return page.has_selector("#results li"), "no results rendered"
"""

__version__ = "0.1.0"
__license__ = "MIT"

from pagescope.exceptions import (
    ConfigurationError,
    ElementNotFoundError,
    NotLoadedError,
    PageScopeError,
    ParentChainError,
    UsageError,
)
from pagescope.interfaces import BaseDriver
from pagescope.scope import SearchScope
from pagescope.session import Session
from pagescope.loadable import LoadState, Loadable, ValidationRegistry
from pagescope.dsl import Element, Elements, SectionField, SectionList
from pagescope.node import Node
from pagescope.page import Page
from pagescope.section import Section
from pagescope.log import get_logger, reset_logger, set_log_level

__all__ = [
    "__version__",
    "__license__",
    # Errors
    "PageScopeError",
    "UsageError",
    "NotLoadedError",
    "ElementNotFoundError",
    "ParentChainError",
    "ConfigurationError",
    # Driver and session
    "BaseDriver",
    "SearchScope",
    "Session",
    # Load validation
    "LoadState",
    "Loadable",
    "ValidationRegistry",
    # Nodes
    "Node",
    "Page",
    "Section",
    # Declarations
    "Element",
    "Elements",
    "SectionField",
    "SectionList",
    # Logging
    "get_logger",
    "set_log_level",
    "reset_logger",
]
