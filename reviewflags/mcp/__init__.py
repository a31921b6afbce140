"""review-flags MCP - Model Context Protocol server for review flags.

This module provides an MCP server that exposes the review-flag command
to LLM clients.
"""

from .server import mcp, run_server

__all__ = ["mcp", "run_server"]
