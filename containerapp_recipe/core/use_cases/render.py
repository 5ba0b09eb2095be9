"""
Render use case — envelope + parameters in, manifest + output out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from containerapp_recipe.core.models.manifest import RecipeOutput, TargetManifest
from containerapp_recipe.core.models.parameters import RecipeParameters
from containerapp_recipe.core.services.context_normalizer import (
    RecipeInputError,
    normalize_context,
)
from containerapp_recipe.core.services.manifest_assembler import assemble_manifest
from containerapp_recipe.core.services.unsupported import DroppedFeature, detect_unsupported

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Result of rendering one recipe invocation."""

    manifest: TargetManifest | None = None
    output: RecipeOutput | None = None
    dropped: list[DroppedFeature] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        if self.error:
            return {"ok": False, "error": self.error}
        return {
            "ok": True,
            "manifest": self.manifest.to_dict() if self.manifest else None,
            "result": self.output.to_dict() if self.output else None,
            "dropped": [d.to_dict() for d in self.dropped],
        }


def render_recipe(envelope: dict[str, Any], parameters: RecipeParameters) -> RenderResult:
    """Translate one recipe context into its platform manifest.

    Args:
        envelope:   Raw recipe context ({resource, application?, environment?}).
        parameters: Target environment and ingress exposure.

    Returns:
        RenderResult — input problems are reported in ``error``, never raised.
    """
    result = RenderResult()

    try:
        context = normalize_context(envelope)
    except RecipeInputError as e:
        logger.warning("Recipe input rejected: %s", e)
        result.error = str(e)
        return result

    result.dropped = detect_unsupported(context)
    result.manifest, result.output = assemble_manifest(context, parameters)

    logger.info(
        "Rendered %s (%d containers, %d features not projected)",
        result.manifest.name,
        len(result.manifest.properties.template.containers),
        len(result.dropped),
    )
    return result
