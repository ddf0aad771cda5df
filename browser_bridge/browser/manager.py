"""Browser connection lifecycle manager."""

import asyncio
from typing import Any

import structlog

from browser_bridge.browser.driver import AutomationDriver, PlaywrightDriver
from browser_bridge.browser.net import PortAllocator
from browser_bridge.browser.state import SessionState
from browser_bridge.config import Settings
from browser_bridge.config import settings as default_settings
from browser_bridge.errors import ClientInitError, LaunchError, NotAvailable
from browser_bridge.mcp import McpClient, McpClientManager, McpClientStatus
from browser_bridge.models import McpServerConfig
from browser_bridge.utils.logging import get_logger

logger = get_logger(__name__)


def client_name_for_port(port: int, prefix: str = "chrome-devtools") -> str:
    """Name of the MCP client attached to the browser on ``port``."""
    return f"{prefix}-{port}"


class BrowserManager:
    """
    Keeps one browser and one MCP client ready on a shared DevTools port.

    The port is allocated once. The browser is relaunched only when it has
    disconnected and the MCP client is reconnected only when it is not
    connected, so repeated calls converge on the same resources.
    """

    def __init__(
        self,
        mcp_manager: McpClientManager | None,
        settings: Settings | None = None,
        driver: AutomationDriver | None = None,
        port_allocator: PortAllocator | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.mcp_manager = mcp_manager
        self.driver = driver or PlaywrightDriver()
        self.port_allocator = port_allocator or PortAllocator(self.settings.loopback_host)
        self.state = SessionState()
        self._lock = asyncio.Lock()

    @property
    def port(self) -> int | None:
        """Remote debugging port, once allocated."""
        return self.state.port

    async def get_client(self) -> McpClient:
        """Get a connected MCP client, bringing the session up if needed."""
        client = self.state.client
        if client is not None and client.get_status() == McpClientStatus.CONNECTED:
            return client

        await self.ensure_ready()
        if self.state.client is None:
            raise NotAvailable("Failed to initialize chrome-devtools MCP client")
        return self.state.client

    async def get_page(self) -> Any:
        """Get the browser page, bringing the session up if needed."""
        if self.state.page is None:
            await self.ensure_ready()
        if self.state.page is None:
            raise NotAvailable("Browser page not available")
        return self.state.page

    async def ensure_ready(self) -> None:
        """
        Bring the port, browser and MCP client up, in that order.

        Stages that are already satisfied are skipped. A failing stage raises
        immediately and leaves earlier stages in place, so the next call
        retries from the failed stage.
        """
        async with self._lock:
            port = await self._ensure_port()

            with structlog.contextvars.bound_contextvars(port=port):
                if not self.state.browser_alive:
                    self.state.drop_browser()
                    await self._launch_browser(port)

                if not self.state.client_alive:
                    await self._connect_client(port)

    async def _ensure_port(self) -> int:
        if self.state.port is None:
            self.state.port = await self.port_allocator.allocate()
            logger.info("Allocated remote debugging port", port=self.state.port)
        return self.state.port

    async def _launch_browser(self, port: int) -> None:
        headless = self.settings.headless
        logger.info("Launching browser", headless=headless)

        # The fixed window size dictates the viewport
        args = [
            f"--remote-debugging-port={port}",
            f"--window-size={self.settings.window_width},{self.settings.window_height}",
        ]

        try:
            browser = await self.driver.launch(headless=headless, args=args)
        except Exception as e:
            raise LaunchError(f"Failed to launch browser on port {port}: {e}") from e

        try:
            context = await browser.new_context(no_viewport=True)
            page = await context.new_page()
        except Exception as e:
            # A browser without a page must not keep holding the port
            try:
                await browser.close()
            except Exception as close_error:
                logger.error("Error closing browser", error=str(close_error))
            raise LaunchError(f"Failed to open a page on port {port}: {e}") from e

        self.state.replace_browser(browser, page)
        logger.info("Browser launched")

    async def _connect_client(self, port: int) -> None:
        if self.mcp_manager is None:
            raise ClientInitError("MCP client manager not available")

        name = client_name_for_port(port, self.settings.mcp_client_prefix)
        client = self.mcp_manager.get_client(name)

        if client is None:
            # Attach to the launched browser instead of starting another one
            browser_url = f"http://{self.settings.loopback_host}:{port}"
            config = McpServerConfig(
                command=self.settings.mcp_command,
                args=["-y", self.settings.mcp_package, "--browser-url", browser_url],
            )
            logger.info("Registering MCP client", name=name, browser_url=browser_url)

            try:
                await self.mcp_manager.register_client(name, config)
            except ClientInitError:
                raise
            except Exception as e:
                raise ClientInitError(f"Failed to register MCP client {name}: {e}") from e

            client = self.mcp_manager.get_client(name)

        if client is None:
            raise ClientInitError(f"Failed to initialize MCP client {name}")

        if client.get_status() != McpClientStatus.CONNECTED:
            try:
                await client.connect()
            except ClientInitError:
                raise
            except Exception as e:
                raise ClientInitError(f"Failed to connect MCP client {name}: {e}") from e

        self.state.client = client

    async def close(self) -> None:
        """Shut the session down: MCP client, browser, then the driver."""
        logger.info("Closing browser session", port=self.state.port)

        if self.state.client is not None:
            await self.state.client.disconnect()
        self.state.client = None

        if self.state.browser is not None:
            try:
                await self.state.browser.close()
            except Exception as e:
                logger.error("Error closing browser", error=str(e))
        self.state.browser = None
        self.state.page = None

        await self.driver.stop()
        logger.info("Browser session closed", port=self.state.port)
