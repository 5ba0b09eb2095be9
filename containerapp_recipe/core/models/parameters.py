"""
Recipe parameters — the target-environment knobs supplied per invocation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RecipeParameters(BaseModel):
    """Invocation parameters.

    Attributes:
        environment:        Platform id of the hosting environment.
        external_ingress:   Expose the selected ingress outside the environment.
        environment_domain: Default DNS domain of the hosting environment,
                            used to build the FQDN output value.
    """

    model_config = ConfigDict(frozen=True)

    environment: str = Field(min_length=1)
    external_ingress: bool = False
    environment_domain: str = ""
