"""
Driver implementations for pagescope.

- **HtmlDriver**: lxml-based driver over static HTML markup
"""

from pagescope.drivers.html import HtmlDriver

__all__ = [
    "HtmlDriver",
]
