"""Tests for data models."""

from types import SimpleNamespace

from browser_bridge.models import CallToolResult, McpServerConfig, ToolResult, ViewportSize


def test_server_config_defaults() -> None:
    """Test MCP server config default values."""
    config = McpServerConfig(command="npx")

    assert config.args == []
    assert config.env is None


def test_call_tool_result_from_mcp() -> None:
    """Test MCP results are normalized."""
    raw = SimpleNamespace(
        content=[SimpleNamespace(type="text", text="Navigated")],
        isError=True,
    )

    result = CallToolResult.from_mcp(raw)

    assert result.is_error
    assert result.content[0].type == "text"
    assert result.text == "Navigated"


def test_call_tool_result_without_content() -> None:
    """Test results with no content have empty text."""
    result = CallToolResult.from_mcp(SimpleNamespace(content=None))

    assert result.content == []
    assert result.text == ""
    assert not result.is_error


def test_tool_result_defaults() -> None:
    """Test ToolResult fields default to None."""
    result = ToolResult(output="Browser opened")

    assert result.output == "Browser opened"
    assert result.error is None
    assert result.url is None


def test_viewport_size() -> None:
    """Test ViewportSize model."""
    size = ViewportSize(width=1024, height=768)

    assert size.width == 1024
    assert size.height == 768
