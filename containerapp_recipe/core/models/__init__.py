"""
Domain models — Pydantic types for the recipe.

All models are re-exported here for convenient access:

    from containerapp_recipe.core.models import RecipeEnvelope, TargetManifest
"""

from containerapp_recipe.core.models.context import (
    AutoScaling,
    ConnectionDefinition,
    ContainerDefinition,
    ContainerResources,
    EnvironmentVariable,
    ProbeDefinition,
    RecipeEnvelope,
    ResourceContext,
    ResourceProperties,
    ScaleMetric,
)
from containerapp_recipe.core.models.manifest import (
    ContainerSpec,
    DaprSpec,
    EnvVar,
    IngressSpec,
    OutputValues,
    ProbeSpec,
    RecipeOutput,
    ScaleSpec,
    TargetManifest,
)
from containerapp_recipe.core.models.parameters import RecipeParameters

__all__ = [
    # context.py
    "AutoScaling",
    "ConnectionDefinition",
    "ContainerDefinition",
    "ContainerResources",
    # manifest.py
    "ContainerSpec",
    "DaprSpec",
    "EnvVar",
    "EnvironmentVariable",
    "IngressSpec",
    "OutputValues",
    "ProbeDefinition",
    "ProbeSpec",
    "RecipeEnvelope",
    "RecipeOutput",
    # parameters.py
    "RecipeParameters",
    "ResourceContext",
    "ResourceProperties",
    "ScaleMetric",
    "ScaleSpec",
    "TargetManifest",
]
