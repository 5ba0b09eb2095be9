"""
Probe translator — container probe definitions → platform probes.
"""

from __future__ import annotations

import logging

from containerapp_recipe.core.models.context import (
    ContainerDefinition,
    HttpGetAction,
    ProbeDefinition,
    TcpSocketAction,
)
from containerapp_recipe.core.models.manifest import HttpGetSpec, ProbeSpec, TcpSocketSpec

logger = logging.getLogger(__name__)

_TIMING_FIELDS = (
    "initial_delay_seconds",
    "period_seconds",
    "timeout_seconds",
    "failure_threshold",
    "success_threshold",
)


def probe_check(probe: ProbeDefinition) -> HttpGetAction | TcpSocketAction | None:
    """The check a probe would translate to: httpGet, else tcpSocket."""
    if probe.http_get is not None:
        return probe.http_get
    return probe.tcp_socket


def translate_probe(probe: ProbeDefinition | None, kind: str) -> ProbeSpec | None:
    """Convert one probe definition to the platform shape.

    ``httpGet`` wins over ``tcpSocket``.  A probe with neither (an exec
    check), or whose chosen check names no port, has no platform
    equivalent and yields ``None``.

    Input shape:
        {httpGet: {port?, path?, scheme?} | tcpSocket: {port?} | exec: {command},
         initialDelaySeconds?, periodSeconds?, timeoutSeconds?,
         failureThreshold?, successThreshold?}
    """
    if probe is None:
        return None

    check = probe_check(probe)
    if check is None:
        logger.debug("%s probe has no HTTP or TCP check, dropping", kind)
        return None
    if check.port is None:
        logger.debug("%s probe check has no port, dropping", kind)
        return None

    spec: dict = {"type": kind}
    if probe.http_get is not None:
        spec["http_get"] = HttpGetSpec(
            port=probe.http_get.port,
            path=probe.http_get.path or "/",
            scheme=(probe.http_get.scheme or "http").upper(),
        )
    else:
        spec["tcp_socket"] = TcpSocketSpec(port=check.port)

    for field in _TIMING_FIELDS:
        value = getattr(probe, field)
        if value is not None:
            spec[field] = value

    return ProbeSpec(**spec)


def container_probes(container: ContainerDefinition) -> list[ProbeSpec]:
    """Liveness then readiness, each only when translatable."""
    probes = [
        translate_probe(container.liveness_probe, "Liveness"),
        translate_probe(container.readiness_probe, "Readiness"),
    ]
    return [p for p in probes if p is not None]
