"""MCP client for a stdio chrome-devtools server."""

from contextlib import AsyncExitStack
from enum import Enum
from typing import Any

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

from browser_bridge.errors import ClientInitError
from browser_bridge.models import CallToolResult, McpServerConfig
from browser_bridge.utils.logging import get_logger

logger = get_logger(__name__)


class McpClientStatus(str, Enum):
    """Connection states of an MCP client."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class McpClient:
    """Named connection to one MCP server started over stdio."""

    def __init__(self, name: str, config: McpServerConfig) -> None:
        self.name = name
        self.config = config
        self._status = McpClientStatus.DISCONNECTED
        self._session: ClientSession | None = None
        self._exit_stack: AsyncExitStack | None = None

    def get_status(self) -> McpClientStatus:
        """Current connection status."""
        return self._status

    async def connect(self) -> None:
        """
        Start the server process and initialize the MCP session.

        Raises:
            ClientInitError: If the server cannot be started or initialized.
        """
        if self._status == McpClientStatus.CONNECTED:
            return

        self._status = McpClientStatus.CONNECTING
        logger.info("Connecting MCP client", name=self.name, command=self.config.command)

        exit_stack = AsyncExitStack()
        try:
            params = StdioServerParameters(
                command=self.config.command,
                args=self.config.args,
                env=self.config.env,
            )
            read, write = await exit_stack.enter_async_context(stdio_client(params))
            session = await exit_stack.enter_async_context(ClientSession(read, write))
            await session.initialize()
        except Exception as e:
            await exit_stack.aclose()
            self._status = McpClientStatus.DISCONNECTED
            raise ClientInitError(f"Failed to connect MCP client {self.name}: {e}") from e

        self._exit_stack = exit_stack
        self._session = session
        self._status = McpClientStatus.CONNECTED
        logger.info("MCP client connected", name=self.name)

    async def disconnect(self) -> None:
        """Close the session and stop the server process."""
        if self._exit_stack:
            try:
                await self._exit_stack.aclose()
            except Exception as e:
                logger.error("Error disconnecting MCP client", name=self.name, error=str(e))
            self._exit_stack = None

        self._session = None
        self._status = McpClientStatus.DISCONNECTED
        logger.debug("MCP client disconnected", name=self.name)

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> CallToolResult:
        """
        Call a tool on the server.

        Args:
            name: Tool name (e.g., "take_snapshot")
            arguments: Structured tool arguments

        Returns:
            Normalized tool result
        """
        if self._session is None or self._status != McpClientStatus.CONNECTED:
            raise ClientInitError(f"MCP client {self.name} is not connected")

        logger.debug("Calling MCP tool", client=self.name, tool=name)
        result = await self._session.call_tool(name, arguments or {})
        return CallToolResult.from_mcp(result)
