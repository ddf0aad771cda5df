"""Registry of named MCP clients."""

from browser_bridge.errors import ClientInitError
from browser_bridge.mcp.client import McpClient
from browser_bridge.models import McpServerConfig
from browser_bridge.utils.logging import get_logger

logger = get_logger(__name__)


class McpClientManager:
    """Holds at most one MCP client per name."""

    def __init__(self) -> None:
        self._clients: dict[str, McpClient] = {}
        self._closed = False

    def get_client(self, name: str) -> McpClient | None:
        """Get a registered client by name."""
        return self._clients.get(name)

    async def register_client(self, name: str, config: McpServerConfig) -> None:
        """
        Register a client under a name.

        Registering an existing name keeps the existing client.

        Raises:
            ClientInitError: If the manager has been closed.
        """
        if self._closed:
            raise ClientInitError(f"Cannot register {name}: MCP client manager is closed")

        if name in self._clients:
            logger.debug("MCP client already registered", name=name)
            return

        self._clients[name] = McpClient(name, config)
        logger.info("Registered MCP client", name=name, command=config.command, args=config.args)

    async def close(self) -> None:
        """Disconnect every client and refuse further registrations."""
        self._closed = True
        names = list(self._clients.keys())
        for name in names:
            client = self._clients.pop(name)
            await client.disconnect()

    @property
    def client_count(self) -> int:
        """Number of registered clients."""
        return len(self._clients)
