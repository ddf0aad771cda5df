"""Data models for browser-bridge."""

from browser_bridge.models.mcp import CallToolResult, McpServerConfig, ToolContent
from browser_bridge.models.tool import ToolResult, ViewportSize

__all__ = [
    "CallToolResult",
    "McpServerConfig",
    "ToolContent",
    "ToolResult",
    "ViewportSize",
]
