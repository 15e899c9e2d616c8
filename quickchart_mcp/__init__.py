"""MCP server exposing QuickChart rendering services as tools."""

__version__ = "1.0.0"
