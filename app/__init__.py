"""Bill signing MCP service: document tools and resources over stdio and HTTP."""

__version__ = "1.0.0"
