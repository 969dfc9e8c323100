"""Shared fixtures for pagescope tests."""

import pytest

from pagescope import Session
from pagescope.config import reset_config
from pagescope.drivers import HtmlDriver
from pagescope.loadable import registry
from pagescope.log import reset_logger

SAMPLE_HTML = """
<html>
<head><title>Search</title></head>
<body>
    <header id="header">
        <a class="logo" href="/">Home</a>
        <nav><a href="/about">About</a><a href="/help">Help</a></nav>
    </header>
    <div id="results">
        <div class="result"><h3>First</h3><a href="/1">Open</a></div>
        <div class="result"><h3>Second</h3><a href="/2">Open</a></div>
        <div class="result" style="display: none"><h3>Hidden</h3></div>
    </div>
    <footer id="footer"><a href="/terms">Terms</a></footer>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Isolate config, logger and validation registries between tests."""
    for var in (
        "PAGESCOPE_DEFAULT_LOAD_VALIDATIONS",
        "PAGESCOPE_LOG_LEVEL",
        "PAGESCOPE_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    reset_logger()
    registry.reset()
    yield
    reset_config()
    reset_logger()
    registry.reset()


@pytest.fixture
def driver():
    """HtmlDriver over the sample search page."""
    return HtmlDriver.from_html(SAMPLE_HTML, url="https://example.com/search?q=py")


@pytest.fixture
def session(driver):
    """Session over the sample search page."""
    return Session(driver)
