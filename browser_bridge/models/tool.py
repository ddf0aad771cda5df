"""Browser tool result models."""

from pydantic import BaseModel


class ToolResult(BaseModel):
    """Outcome of a browser interaction."""

    output: str | None = None
    error: str | None = None
    url: str | None = None


class ViewportSize(BaseModel):
    """Page viewport dimensions in CSS pixels."""

    width: float
    height: float
