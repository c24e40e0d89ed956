"""Rich output formatting helpers."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bkit_core.platform import Platform, PlatformContext

UNSET = "undefined"


def print_banner(console: Console, version: str) -> None:
    """Print the debug info banner.

    Args:
        console: Rich console for output.
        version: Package version string.
    """
    console.print(
        Panel(
            f"[bold cyan]--- Debug Info ---[/bold cyan] bkit v{version}",
            border_style="cyan",
        )
    )


def create_debug_table(context: PlatformContext, constant: Platform) -> Table:
    """Create the table of detection results and raw variables.

    Args:
        context: Snapshot built at startup.
        constant: The process-wide platform constant.

    Returns:
        Rich Table with one row per reported value.
    """
    table = Table(title="Platform Detection")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="bold")

    table.add_row("BKIT_PLATFORM", constant.value)
    table.add_row("Detected Platform", context.platform.value)
    table.add_row("isGeminiCli()", str(context.is_gemini_cli).lower())
    for name, value in context.variables:
        table.add_row(name, UNSET if value is None else value)
    return table
