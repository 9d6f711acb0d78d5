"""
Context-Seven MCP Server - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Literal
from pathlib import Path


class Context7Settings(BaseSettings):
    """Context7 documentation API configuration."""
    base_url: str = Field("https://context7.com/api", alias="CONTEXT7_API_BASE_URL")
    source_header: str = Field("mcp-server", alias="CONTEXT7_SOURCE_HEADER")
    timeout_s: float = Field(30.0, alias="CONTEXT7_TIMEOUT_S")
    default_tokens: int = Field(10000, alias="CONTEXT7_DEFAULT_TOKENS")

    model_config = {"env_prefix": "", "extra": "ignore"}


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    name: str = Field("context-seven", alias="MCP_SERVER_NAME")
    transport: Literal["sse", "stdio"] = Field("stdio", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("127.0.0.1", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )
    directory: Path = Field(Path("logs"), alias="LOG_DIR")
    to_file: bool = Field(True, alias="LOG_TO_FILE")
    backup_count: int = Field(14, alias="LOG_BACKUP_COUNT")

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    context7: Context7Settings = Field(default_factory=Context7Settings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
