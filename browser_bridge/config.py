"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bridge settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="BROWSER_BRIDGE_", env_file=".env")

    # Browser settings
    headless: bool = False
    window_width: int = 1024
    window_height: int = 1024

    # Network settings
    loopback_host: str = "127.0.0.1"

    # MCP server settings
    mcp_client_prefix: str = "chrome-devtools"
    mcp_command: str = "npx"
    mcp_package: str = "chrome-devtools-mcp@latest"

    # Interaction settings
    coordinate_scale: int = 1000
    drag_steps: int = 5
    overlay_enabled: bool = True

    # Logging
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
