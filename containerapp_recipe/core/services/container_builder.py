"""
Container spec builder — one platform container per definition.

Workload and init containers are composed differently:

    workload  resources (requests > limits > default), command, args,
              env = declared literals + connection env + metadata,
              probes (liveness, readiness)
    init      resources (requests > default), command, args,
              env = declared literals only, no probes

Env entries backed by an external secret reference are left out; the
platform body only carries literal values.
"""

from __future__ import annotations

import logging

from containerapp_recipe.core.models.context import ContainerDefinition, ResourceContext
from containerapp_recipe.core.models.manifest import ContainerSpec, EnvVar
from containerapp_recipe.core.services.connection_env import connection_env_vars
from containerapp_recipe.core.services.probes import container_probes
from containerapp_recipe.core.services.resource_quantity import (
    convert_init_resources,
    convert_resources,
)

logger = logging.getLogger(__name__)


def literal_env_vars(container: ContainerDefinition) -> list[EnvVar]:
    """Declared env entries with a literal value, in declaration order."""
    return [
        EnvVar(name=name, value=var.value)
        for name, var in container.env.items()
        if var.is_literal
    ]


def metadata_env_vars(context: ResourceContext) -> list[EnvVar]:
    return [
        EnvVar(name="APPLICATION_NAME", value=context.application_name),
        EnvVar(name="ENVIRONMENT_NAME", value=context.environment_label),
        EnvVar(name="RESOURCE_NAME", value=context.name),
    ]


def build_container(
    name: str,
    container: ContainerDefinition,
    context: ResourceContext,
    connection_env: list[EnvVar] | None = None,
) -> ContainerSpec:
    """Compose a workload container spec."""
    if connection_env is None:
        connection_env = connection_env_vars(context)

    env = literal_env_vars(container) + connection_env + metadata_env_vars(context)
    probes = container_probes(container)

    return ContainerSpec(
        name=name,
        image=container.image,
        resources=convert_resources(container.resources),
        command=container.command,
        args=container.args,
        env=env,
        probes=probes or None,
    )


def build_init_container(name: str, container: ContainerDefinition) -> ContainerSpec:
    """Compose an init container spec (no probes, no injected env)."""
    env = literal_env_vars(container)
    return ContainerSpec(
        name=name,
        image=container.image,
        resources=convert_init_resources(container.resources),
        command=container.command,
        args=container.args,
        env=env or None,
    )


def build_containers(context: ResourceContext) -> tuple[list[ContainerSpec], list[ContainerSpec]]:
    """Split the containers bag into (workload, init) specs, order preserved."""
    connection_env = connection_env_vars(context)
    workload: list[ContainerSpec] = []
    init: list[ContainerSpec] = []

    for name, container in context.containers.items():
        if container.init_container:
            init.append(build_init_container(name, container))
        else:
            workload.append(build_container(name, container, context, connection_env))

    logger.debug("Built %d workload / %d init containers", len(workload), len(init))
    return workload, init
