"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import copy

import pytest

ENVIRONMENT_ID = (
    "/subscriptions/0000-1111/resourceGroups/rg-apps"
    "/providers/Microsoft.App/managedEnvironments/prod-env"
)

_SAMPLE_ENVELOPE = {
    "resource": {
        "name": "Orders_API",
        "id": "/planes/radius/local/resourceGroups/default/providers/Applications.Core/containers/orders_api",
        "properties": {
            "containers": {
                "main": {
                    "image": "ghcr.io/acme/orders:1.4.2",
                    "ports": {"web": {"containerPort": 8080}},
                    "livenessProbe": {"httpGet": {"port": 8080, "path": "/healthz"}},
                },
                "init": {
                    "image": "busybox:1.36",
                    "command": ["sh", "-c", "echo warming"],
                    "initContainer": True,
                },
            },
        },
        "connections": {},
    },
    "application": {"name": "shop"},
    "environment": {"id": "/planes/radius/local/resourceGroups/default/providers/Applications.Core/environments/prod"},
}


@pytest.fixture
def envelope() -> dict:
    """A fresh copy of the two-container sample envelope."""
    return copy.deepcopy(_SAMPLE_ENVELOPE)


@pytest.fixture
def environment_id() -> str:
    return ENVIRONMENT_ID
