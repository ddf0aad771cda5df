"""MCP client module."""

from browser_bridge.mcp.client import McpClient, McpClientStatus
from browser_bridge.mcp.manager import McpClientManager

__all__ = [
    "McpClient",
    "McpClientStatus",
    "McpClientManager",
]
