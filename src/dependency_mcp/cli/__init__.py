"""Command-line interface for dependency-mcp."""
