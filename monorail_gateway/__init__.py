"""Monorail DEX gateway: token lookup, quotes and swaps over HTTP and MCP."""

__version__ = "0.2.0"
