"""
Envelope loader — reads a recipe context file into a plain mapping.

The provisioning system hands the recipe a JSON document; operators
running the CLI by hand usually prefer YAML.  ``yaml.safe_load`` reads
both, so one loader covers either.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# The context may sit under this key or be the document root
CONTEXT_KEY = "context"


class ConfigError(Exception):
    """Raised when the envelope file is missing or unreadable."""


def load_envelope(path: Path) -> dict[str, Any]:
    """Load a recipe envelope from a YAML or JSON file.

    Args:
        path: File holding ``{resource, application?, environment?}``,
              optionally wrapped under a ``context`` key.

    Returns:
        The raw envelope mapping (validated later by the normalizer).

    Raises:
        ConfigError: If the file is missing, unreadable or not a mapping.
    """
    if not path.is_file():
        raise ConfigError(f"Envelope file not found: {path}")

    logger.debug("Loading recipe envelope from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML/JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")

    envelope = data.get(CONTEXT_KEY, data) if CONTEXT_KEY in data else data
    if not isinstance(envelope, dict):
        raise ConfigError(f"'{CONTEXT_KEY}' in {path} must be a mapping")

    return envelope
