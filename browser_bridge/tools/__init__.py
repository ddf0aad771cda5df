"""Browser interaction tools."""

from browser_bridge.tools.browser_tools import BrowserTools

__all__ = [
    "BrowserTools",
]
