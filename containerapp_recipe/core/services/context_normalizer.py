"""
Context normalizer — raw envelope in, ``ResourceContext`` out.

Runs first in the pipeline.  Validates the envelope, defaults every
absent bag, and derives the names the rest of the recipe relies on:

    normalized name    lowercase, underscores → hyphens
    unique suffix      short digest of the resource id (uniqueness only)
    platform name      normalized name trimmed to the platform budget + suffix
    environment label  last path segment of the environment id
"""

from __future__ import annotations

import hashlib
import logging
import re
from typing import Any

from pydantic import ValidationError

from containerapp_recipe.core.models.context import RecipeEnvelope, ResourceContext

logger = logging.getLogger(__name__)

# Container app names: ≤ 32 chars, lowercase alphanumerics and hyphens.
PLATFORM_NAME_MAX_LENGTH = 32
UNIQUE_SUFFIX_LENGTH = 8

_INVALID_NAME_CHARS = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-{2,}")


class RecipeInputError(Exception):
    """Raised when the envelope cannot be read as a resource description."""


def normalize_name(name: str) -> str:
    """Lowercase the name and turn underscores into hyphens."""
    return name.lower().replace("_", "-")


def unique_suffix(identity: str) -> str:
    """Short, content-stable suffix derived from the resource identity."""
    digest = hashlib.sha256(identity.encode("utf-8")).hexdigest()
    return digest[:UNIQUE_SUFFIX_LENGTH]


def platform_name(normalized: str, suffix: str) -> str:
    """Build ``<stem>-<suffix>`` within the platform's name budget."""
    safe = _HYPHEN_RUNS.sub("-", _INVALID_NAME_CHARS.sub("", normalized))
    budget = PLATFORM_NAME_MAX_LENGTH - len(suffix) - 1
    stem = safe[:budget].strip("-")
    return f"{stem or 'app'}-{suffix}"


def environment_label(environment_id: str) -> str:
    """Last path segment of an environment id, or ``""``."""
    if not environment_id:
        return ""
    return environment_id.rstrip("/").rsplit("/", 1)[-1]


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into ``path: message`` clauses."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else err.get("msg", "invalid"))
    return "; ".join(parts)


def normalize_context(raw: dict[str, Any] | RecipeEnvelope) -> ResourceContext:
    """Validate the envelope and compute every derived name.

    Raises:
        RecipeInputError: If the envelope is malformed, most notably
            when a container has no image or no workload (non-init)
            container is declared.
    """
    if isinstance(raw, RecipeEnvelope):
        envelope = raw
    else:
        try:
            envelope = RecipeEnvelope.model_validate(raw or {})
        except ValidationError as e:
            raise RecipeInputError(
                f"Invalid resource description: {describe_validation_error(e)}"
            ) from e

    resource = envelope.resource
    if not any(not c.init_container for c in resource.properties.containers.values()):
        raise RecipeInputError(
            f"Resource '{resource.name}' declares no workload container"
            " (every container is an init container, or none is declared)"
        )

    normalized = normalize_name(resource.name)
    suffix = unique_suffix(resource.id or resource.name)
    env_id = envelope.environment.id if envelope.environment else ""

    context = ResourceContext(
        name=resource.name,
        id=resource.id,
        application_name=envelope.application.name if envelope.application else "",
        environment_id=env_id,
        properties=resource.properties,
        connections=resource.connections,
        normalized_name=normalized,
        unique_suffix=suffix,
        platform_name=platform_name(normalized, suffix),
        environment_label=environment_label(env_id),
    )
    logger.debug(
        "Normalized resource '%s' → %s (%d containers)",
        resource.name, context.platform_name, len(context.containers),
    )
    return context
