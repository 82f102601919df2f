"""Rich output formatting helpers for the dependency-mcp CLI.

Renders lookup results as a table: found packages in green, missing or
failed ones in red with their error message.
"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from dependency_mcp.console import console
from dependency_mcp.models import PackageResult
from dependency_mcp.registry import NOT_FOUND_MESSAGE

# Version lists can run into thousands of entries; show the newest few.
_MAX_VERSIONS_SHOWN = 5


def _status(result: PackageResult) -> Text:
    if not result.found:
        return Text("NOT FOUND" if result.error == NOT_FOUND_MESSAGE else "ERROR", style="bold red")
    if result.exists is False:
        return Text("MISSING", style="yellow")
    return Text("OK", style="bold green")


def _detail(result: PackageResult) -> str:
    if result.error:
        return result.error
    if result.exists is not None:
        return f"{result.version} {'exists' if result.exists else 'does not exist'}"
    parts = []
    if result.latest_version:
        parts.append(result.latest_version)
    if result.versions is not None:
        shown = ", ".join(result.versions[-_MAX_VERSIONS_SHOWN:])
        more = len(result.versions) - _MAX_VERSIONS_SHOWN
        parts.append(f"[{len(result.versions)} versions: {shown}{' ...' if more > 0 else ''}]")
    return " ".join(parts) or "-"


def print_results(results: list[PackageResult], *, title: str = "Results") -> None:
    """Print a summary table of lookup results.

    Args:
        results: Results in the order they were requested.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Package", style="bold")
    table.add_column("Registry", style="dim")
    table.add_column("Status", justify="center")
    table.add_column("Detail")

    for result in results:
        table.add_row(result.package, result.registry, _status(result), _detail(result))

    console.print(table)
    found = sum(1 for r in results if r.found)
    console.print(f"[bold]{len(results)}[/bold] looked up | [green]{found} found[/green]")
