"""
CLI commands for rendering recipes.

Thin wrappers over ``containerapp_recipe.core.use_cases.render``.
Documents go to stdout; status lines go to stderr.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
import yaml


def _dump(data: dict, fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False).rstrip("\n")
    return json.dumps(data, indent=2)


@click.command("render")
@click.argument("envelope", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--environment",
    "-e",
    "environment",
    envvar="RECIPE_ENVIRONMENT_ID",
    required=True,
    help="Platform id of the hosting environment (or RECIPE_ENVIRONMENT_ID).",
)
@click.option("--external", is_flag=True, help="Expose ingress outside the environment.")
@click.option(
    "--domain",
    "environment_domain",
    envvar="RECIPE_ENVIRONMENT_DOMAIN",
    default="",
    help="Default DNS domain of the environment, used for the FQDN output.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Document format.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True,
              help="Output the full render result as JSON.")
@click.pass_context
def render(
    ctx: click.Context,
    envelope: Path,
    environment: str,
    external: bool,
    environment_domain: str,
    fmt: str,
    as_json: bool,
) -> None:
    """Render a recipe context file into a container-app manifest.

    Examples:

        containerapp-recipe render context.yaml -e /subscriptions/.../managedEnvironments/prod

        containerapp-recipe render context.json -e $ENV_ID --external --format yaml
    """
    from containerapp_recipe.core.config.loader import ConfigError, load_envelope
    from containerapp_recipe.core.models.parameters import RecipeParameters
    from containerapp_recipe.core.use_cases.render import render_recipe

    try:
        raw = load_envelope(envelope)
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"ok": False, "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    parameters = RecipeParameters(
        environment=environment,
        external_ingress=external,
        environment_domain=environment_domain,
    )
    result = render_recipe(raw, parameters)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    manifest, output = result.manifest, result.output
    if not result.ok or manifest is None or output is None:
        click.secho(f"❌ {result.error or 'Nothing was rendered'}", fg="red", err=True)
        sys.exit(1)

    click.echo(_dump(
        {"manifest": manifest.to_dict(), "result": output.to_dict()},
        fmt,
    ))

    if result.dropped and not ctx.obj.get("quiet", False):
        click.secho(f"⚠️  {len(result.dropped)} feature(s) not projected:", fg="yellow", err=True)
        for item in result.dropped:
            where = f" [{item.container}]" if item.container else ""
            click.echo(f"   • {item.feature}{where} {item.detail}", err=True)


@click.command("unsupported")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def unsupported(as_json: bool) -> None:
    """List input features that are accepted but never projected."""
    from containerapp_recipe.core.services.unsupported import UNSUPPORTED_FEATURES

    if as_json:
        click.echo(json.dumps([f.to_dict() for f in UNSUPPORTED_FEATURES], indent=2))
        return

    click.secho("🚫 Not projected into the manifest:", fg="cyan", bold=True)
    click.echo()
    for feature in UNSUPPORTED_FEATURES:
        click.secho(f"   {feature.key}", fg="white", bold=True)
        click.echo(f"      field: {feature.field}")
        click.echo(f"      {feature.rationale}")
    click.echo()
