"""``dependency-mcp serve`` — Run the MCP tool server over stdio.

Protocol messages use stdout, so logs go to stderr only.
"""

from __future__ import annotations

import click


@click.command("serve")
def serve_command() -> None:
    """Serve the package lookup tools to an MCP client over stdio."""
    from dependency_mcp.server import run
    run()
