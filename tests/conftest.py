"""Shared fixtures for browser-bridge tests."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from browser_bridge.browser import BrowserManager
from browser_bridge.config import Settings
from browser_bridge.mcp import McpClientStatus
from browser_bridge.models import CallToolResult, McpServerConfig


class FakeMcpClient:
    """Stand-in for McpClient that records calls."""

    def __init__(self, name: str, config: McpServerConfig) -> None:
        self.name = name
        self.config = config
        self.status = McpClientStatus.DISCONNECTED
        self.connect_calls = 0
        self.tool_calls: list[tuple[str, dict[str, Any]]] = []
        self.tool_result = CallToolResult()

    def get_status(self) -> McpClientStatus:
        return self.status

    async def connect(self) -> None:
        self.connect_calls += 1
        self.status = McpClientStatus.CONNECTED

    async def disconnect(self) -> None:
        self.status = McpClientStatus.DISCONNECTED

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> CallToolResult:
        self.tool_calls.append((name, arguments or {}))
        return self.tool_result


class FakeMcpClientManager:
    """Stand-in registry keeping FakeMcpClient instances by name."""

    def __init__(self) -> None:
        self.clients: dict[str, FakeMcpClient] = {}
        self.registrations: list[tuple[str, McpServerConfig]] = []

    def get_client(self, name: str) -> FakeMcpClient | None:
        return self.clients.get(name)

    async def register_client(self, name: str, config: McpServerConfig) -> None:
        self.registrations.append((name, config))
        self.clients[name] = FakeMcpClient(name, config)


def make_browser(connected: bool = True) -> MagicMock:
    """Build a fake Playwright browser whose context yields a fresh page."""
    page = MagicMock(name="page")
    context = MagicMock(name="context")
    context.new_page = AsyncMock(return_value=page)

    browser = MagicMock(name="browser")
    browser.is_connected.return_value = connected
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()
    browser.page = page
    return browser


@pytest.fixture
def settings() -> Settings:
    return Settings(headless=True, overlay_enabled=False)


@pytest.fixture
def port_allocator() -> MagicMock:
    allocator = MagicMock()
    allocator.allocate = AsyncMock(return_value=54213)
    return allocator


@pytest.fixture
def driver() -> MagicMock:
    driver = MagicMock()
    driver.launch = AsyncMock(side_effect=lambda **_: make_browser())
    driver.stop = AsyncMock()
    return driver


@pytest.fixture
def mcp_manager() -> FakeMcpClientManager:
    return FakeMcpClientManager()


@pytest.fixture
def manager(
    mcp_manager: FakeMcpClientManager,
    settings: Settings,
    driver: MagicMock,
    port_allocator: MagicMock,
) -> BrowserManager:
    return BrowserManager(
        mcp_manager,  # type: ignore[arg-type]
        settings=settings,
        driver=driver,
        port_allocator=port_allocator,
    )


@pytest.fixture
def browser_factory() -> Any:
    return make_browser
