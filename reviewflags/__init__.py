"""review-flags - Review status labels for GitHub pull requests.

Namespace package containing:
- reviewflags.sdk: Label reconciliation and the GitHub labels client
- reviewflags.chat: Chat robot boundary and the review-flag command
- reviewflags.cli: Command-line interface and shell adapter
- reviewflags.mcp: Model Context Protocol server for LLM integration
"""

__version__ = "1.0.0"
