"""Context-Seven - MCP server for Context7 library documentation."""

__version__ = "0.1.0"
