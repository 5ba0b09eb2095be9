"""
Manifest assembler & output projector.

Last stage of the pipeline: stitches the container specs, ingress,
Dapr and scale blocks into one ``TargetManifest`` and derives the
``RecipeOutput`` returned to the provisioning system.
"""

from __future__ import annotations

import logging

from containerapp_recipe.core.models.context import ResourceContext
from containerapp_recipe.core.models.manifest import (
    Configuration,
    IngressSpec,
    ManifestProperties,
    OutputValues,
    RecipeOutput,
    TargetManifest,
    Template,
)
from containerapp_recipe.core.models.parameters import RecipeParameters
from containerapp_recipe.core.services.container_builder import build_containers
from containerapp_recipe.core.services.dapr import build_dapr
from containerapp_recipe.core.services.ingress import build_ingress, select_ingress_port
from containerapp_recipe.core.services.scaling import build_scale

logger = logging.getLogger(__name__)

CONTAINER_APP_PROVIDER = "Microsoft.App/containerApps"


def platform_resource_id(environment_id: str, name: str) -> str:
    """Resource id of the container app, scoped like its environment.

    ``/subscriptions/<s>/resourceGroups/<rg>/...`` environment ids give
    ``/subscriptions/<s>/resourceGroups/<rg>/providers/Microsoft.App/containerApps/<name>``.
    Anything else gives the bare ``Microsoft.App/containerApps/<name>`` reference.
    """
    segments = [s for s in environment_id.split("/") if s]
    lowered = [s.lower() for s in segments]
    try:
        sub_idx = lowered.index("subscriptions")
        rg_idx = lowered.index("resourcegroups")
        subscription = segments[sub_idx + 1]
        group = segments[rg_idx + 1]
    except (ValueError, IndexError):
        return f"{CONTAINER_APP_PROVIDER}/{name}"
    return (
        f"/subscriptions/{subscription}/resourceGroups/{group}"
        f"/providers/{CONTAINER_APP_PROVIDER}/{name}"
    )


def output_values(
    name: str,
    ingress: IngressSpec | None,
    environment_domain: str = "",
) -> OutputValues:
    """FQDN/URL of the ingress, empty strings when there is none."""
    if ingress is None:
        return OutputValues()

    if not environment_domain:
        fqdn = name
    elif ingress.external:
        fqdn = f"{name}.{environment_domain}"
    else:
        fqdn = f"{name}.internal.{environment_domain}"
    return OutputValues(fqdn=fqdn, url=f"https://{fqdn}")


def manifest_tags(context: ResourceContext) -> dict[str, str]:
    return {
        "application": context.application_name,
        "environment": context.environment_label,
        "resource": context.name,
    }


def assemble_manifest(
    context: ResourceContext,
    parameters: RecipeParameters,
) -> tuple[TargetManifest, RecipeOutput]:
    """Run the remaining pipeline stages and combine their results."""
    target_port = select_ingress_port(context.containers)
    ingress = build_ingress(target_port, external=parameters.external_ingress)
    dapr = build_dapr(context, target_port)
    containers, init_containers = build_containers(context)
    scale = build_scale(context.properties)

    manifest = TargetManifest(
        name=context.platform_name,
        tags=manifest_tags(context),
        properties=ManifestProperties(
            environment_id=parameters.environment,
            configuration=Configuration(ingress=ingress, dapr=dapr),
            template=Template(
                containers=containers,
                init_containers=init_containers or None,
                scale=scale,
            ),
        ),
    )

    output = RecipeOutput(
        resources=[platform_resource_id(parameters.environment, context.platform_name)],
        values=output_values(context.platform_name, ingress, parameters.environment_domain),
    )

    logger.debug("Assembled manifest %s (ingress=%s)", manifest.name, target_port)
    return manifest, output
