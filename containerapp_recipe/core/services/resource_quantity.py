"""
Resource-quantity converter — abstract CPU/memory → platform units.

Precedence for workload containers:
    cpu     requests.cpu          > limits.cpu          > 0.25 cores
    memory  requests.memoryInMib  > limits.memoryInMib  > 0.5Gi

Init containers only look at ``requests``.

MiB → GiB uses integer division, so 1536 MiB becomes ``1Gi`` and
anything under 1024 MiB becomes ``0Gi``.  The truncation is not reported.
"""

from __future__ import annotations

from containerapp_recipe.core.models.context import ContainerResources, ResourceQuantity
from containerapp_recipe.core.models.manifest import ContainerResourcesSpec

DEFAULT_CPU = 0.25
DEFAULT_MEMORY = "0.5Gi"


def memory_from_mib(mib: int) -> str:
    """Whole-GiB memory string (truncating)."""
    return f"{mib // 1024}Gi"


def _first(*values):
    for v in values:
        if v is not None:
            return v
    return None


def convert_resources(resources: ContainerResources | None) -> ContainerResourcesSpec:
    """Workload policy: requests, then limits, then defaults."""
    requests = (resources.requests if resources else None) or ResourceQuantity()
    limits = (resources.limits if resources else None) or ResourceQuantity()

    cpu = _first(requests.cpu, limits.cpu)
    mib = _first(requests.memory_in_mib, limits.memory_in_mib)

    return ContainerResourcesSpec(
        cpu=cpu if cpu is not None else DEFAULT_CPU,
        memory=memory_from_mib(mib) if mib is not None else DEFAULT_MEMORY,
    )


def convert_init_resources(resources: ContainerResources | None) -> ContainerResourcesSpec:
    """Init-container policy: requests only, then defaults."""
    requests = (resources.requests if resources else None) or ResourceQuantity()

    return ContainerResourcesSpec(
        cpu=requests.cpu if requests.cpu is not None else DEFAULT_CPU,
        memory=(
            memory_from_mib(requests.memory_in_mib)
            if requests.memory_in_mib is not None
            else DEFAULT_MEMORY
        ),
    )
