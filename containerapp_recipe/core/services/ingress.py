"""
Ingress selector — pick the single reachable container port.

The first container (declaration order) that declares any port owns
ingress, through its first declared port.  Ports on later containers are
ignored: a container app exposes one ingress target.
"""

from __future__ import annotations

import logging

from containerapp_recipe.core.models.context import ContainerDefinition
from containerapp_recipe.core.models.manifest import IngressSpec

logger = logging.getLogger(__name__)


def select_ingress_port(containers: dict[str, ContainerDefinition]) -> int | None:
    """Return the ingress target port, or None when nothing listens."""
    for name, container in containers.items():
        for port in container.ports.values():
            logger.debug("Ingress → container '%s' port %d", name, port.container_port)
            return port.container_port
    return None


def build_ingress(target_port: int | None, *, external: bool = False) -> IngressSpec | None:
    if target_port is None:
        return None
    return IngressSpec(external=external, target_port=target_port)
