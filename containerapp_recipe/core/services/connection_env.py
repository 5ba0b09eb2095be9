"""
Connection projector — connection properties → environment variables.

Each connection's flat property bag becomes ``CONNECTION_<NAME>_<PROP>``
entries on every workload container.  Order follows connection
declaration order, then property declaration order, so repeated runs
diff cleanly.
"""

from __future__ import annotations

import logging

from containerapp_recipe.core.models.context import ResourceContext, as_text
from containerapp_recipe.core.models.manifest import EnvVar

logger = logging.getLogger(__name__)

# Bookkeeping properties of the connected resource, never injected.
RESERVED_CONNECTION_PROPERTIES = frozenset({"recipe", "status", "provisioningState"})


def connection_env_name(connection: str, prop: str) -> str:
    return f"CONNECTION_{connection}_{prop}".upper()


def connection_env_vars(context: ResourceContext) -> list[EnvVar]:
    """Project every enabled connection into env entries."""
    definitions = context.properties.connections
    result: list[EnvVar] = []

    for conn_name, props in context.connections.items():
        definition = definitions.get(conn_name)
        if definition is not None and definition.disable_default_env_vars:
            logger.debug("Connection '%s' opts out of default env vars", conn_name)
            continue
        for prop, value in (props or {}).items():
            if prop in RESERVED_CONNECTION_PROPERTIES:
                continue
            result.append(EnvVar(name=connection_env_name(conn_name, prop), value=as_text(value)))

    return result
