"""CLI entry point for host tool diagnostics."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from bkit_core import __version__
from bkit_core.cli.output import create_debug_table, print_banner
from bkit_core.platform import (
    PlatformContext,
    get_platform_constant,
    is_debug_enabled,
)

console = Console()


def configure_logging(debug: bool) -> None:
    """Route bkit logs through Rich.

    Replaces any handler installed by an earlier invocation.

    Args:
        debug: Log at DEBUG when True, WARNING otherwise.
    """
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    pkg_logger = logging.getLogger("bkit_core")
    pkg_logger.handlers.clear()
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if debug else logging.WARNING)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="bkit")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """bkit environment diagnostics.

    Reports which host tool (Gemini CLI or Claude Code) launched bkit.
    """
    configure_logging(is_debug_enabled())

    ctx.ensure_object(dict)
    ctx.obj["constant"] = get_platform_constant()
    ctx.obj["context"] = PlatformContext.from_env()
    ctx.obj["console"] = console

    # Default action: show debug info
    if ctx.invoked_subcommand is None:
        ctx.invoke(debug)


@cli.command()
@click.pass_context
def debug(ctx: click.Context) -> None:
    """Print detection results and the variables they are based on."""
    out = ctx.obj["console"]
    print_banner(out, __version__)
    out.print(create_debug_table(ctx.obj["context"], ctx.obj["constant"]))


@cli.command("platform")
@click.pass_context
def platform_cmd(ctx: click.Context) -> None:
    """Print the detected platform tag."""
    click.echo(ctx.obj["context"].platform.value)
