"""webdev-mcp: web development tools served over MCP."""

__version__ = "0.1.2"
