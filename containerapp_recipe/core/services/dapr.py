"""
Dapr sidecar configurator.
"""

from __future__ import annotations

from containerapp_recipe.core.models.context import ResourceContext
from containerapp_recipe.core.models.manifest import DaprSpec

DAPR_APP_PROTOCOL = "http"


def build_dapr(context: ResourceContext, ingress_port: int | None) -> DaprSpec | None:
    """Enable the sidecar when the ``daprSidecar`` extension is declared.

    ``appId`` falls back to the normalized resource name and ``appPort``
    to the ingress target port.  No extension, no block.
    """
    sidecar = context.properties.extensions.dapr_sidecar
    if sidecar is None:
        return None

    return DaprSpec(
        enabled=True,
        app_id=sidecar.app_id or context.normalized_name,
        app_port=sidecar.app_port if sidecar.app_port is not None else ingress_port,
        app_protocol=DAPR_APP_PROTOCOL,
    )
