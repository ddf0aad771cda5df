"""Connection state held by a browser manager."""

from dataclasses import dataclass
from typing import Any

from browser_bridge.mcp.client import McpClient, McpClientStatus


@dataclass
class SessionState:
    """The port, browser, page and MCP client owned by one manager."""

    port: int | None = None
    browser: Any | None = None
    page: Any | None = None
    client: McpClient | None = None

    @property
    def browser_alive(self) -> bool:
        """Whether a browser is stored and still connected."""
        return self.browser is not None and bool(self.browser.is_connected())

    @property
    def client_alive(self) -> bool:
        """Whether a client is stored and reports connected."""
        return self.client is not None and self.client.get_status() == McpClientStatus.CONNECTED

    def replace_browser(self, browser: Any, page: Any) -> None:
        """Store a freshly launched browser, dropping the previous page."""
        self.browser = browser
        self.page = page

    def drop_browser(self) -> None:
        """Forget a dead browser and its page."""
        self.browser = None
        self.page = None
