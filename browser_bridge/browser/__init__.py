"""Browser lifecycle module."""

from browser_bridge.browser.driver import AutomationDriver, PlaywrightDriver
from browser_bridge.browser.manager import BrowserManager, client_name_for_port
from browser_bridge.browser.net import PortAllocator
from browser_bridge.browser.state import SessionState

__all__ = [
    "AutomationDriver",
    "PlaywrightDriver",
    "BrowserManager",
    "client_name_for_port",
    "PortAllocator",
    "SessionState",
]
