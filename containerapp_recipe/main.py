"""
Container Apps recipe — CLI entrypoint.

Usage:
    python -m containerapp_recipe.main --help
    python -m containerapp_recipe.main render context.yaml --environment <env-id>
    python -m containerapp_recipe.main unsupported
"""

from __future__ import annotations

import click

from containerapp_recipe import __version__
from containerapp_recipe.core.observability.logging_config import configure_from_cli


@click.group()
@click.version_option(version=__version__, prog_name="containerapp-recipe")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """Container Apps recipe — render container workloads into platform manifests."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug

    # ── Logging setup (once, at process start) ──────────────────
    configure_from_cli(debug=debug, verbose=verbose, quiet=quiet)


# ── Register commands from containerapp_recipe/ui/cli/ ────────────

from containerapp_recipe.ui.cli.recipe import render, unsupported  # noqa: E402

cli.add_command(render)
cli.add_command(unsupported)


if __name__ == "__main__":
    cli()
