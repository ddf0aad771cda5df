"""MCP server and tool call models."""

from typing import Any

from pydantic import BaseModel, Field


class McpServerConfig(BaseModel):
    """How to start a stdio MCP server."""

    command: str
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] | None = None


class ToolContent(BaseModel):
    """A single content item returned by an MCP tool."""

    type: str
    text: str | None = None
    data: str | None = None
    mime_type: str | None = None


class CallToolResult(BaseModel):
    """Normalized result of an MCP tool call."""

    content: list[ToolContent] = Field(default_factory=list)
    is_error: bool = False

    @classmethod
    def from_mcp(cls, result: Any) -> "CallToolResult":
        """Build from an ``mcp.types.CallToolResult``."""
        content = [
            ToolContent(
                type=item.type,
                text=getattr(item, "text", None),
                data=getattr(item, "data", None),
                mime_type=getattr(item, "mimeType", None),
            )
            for item in getattr(result, "content", None) or []
        ]
        return cls(content=content, is_error=bool(getattr(result, "isError", False)))

    @property
    def text(self) -> str:
        """Concatenated text of all text items."""
        return "".join(item.text or "" for item in self.content if item.type == "text")
