"""
Unsupported features — everything the recipe accepts but never projects.

The platform's container-app schema is narrower than the abstract
resource model.  Rather than failing, the recipe drops what it cannot
represent.  This module is the one place that list lives, together with
the reason for each entry, so the behaviour is a documented contract:

    - no entry here ever produces a manifest field
    - no entry here ever raises

``detect_unsupported()`` reports which of these a given context actually
uses, so callers can log or display what was left out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from containerapp_recipe.core.models.context import ResourceContext
from containerapp_recipe.core.services.probes import probe_check
from containerapp_recipe.core.services.scaling import TRANSLATABLE_METRICS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnsupportedFeature:
    """A feature of the abstract model with no platform counterpart."""

    key: str
    field: str
    rationale: str

    def to_dict(self) -> dict:
        return {"key": self.key, "field": self.field, "rationale": self.rationale}


@dataclass(frozen=True)
class DroppedFeature:
    """One occurrence of an unsupported feature in a concrete context."""

    feature: str
    container: str = ""
    detail: str = ""

    def to_dict(self) -> dict:
        return {"feature": self.feature, "container": self.container, "detail": self.detail}


EMPTY_ENV = UnsupportedFeature(
    key="empty-env",
    field="containers.*.env.* (no value, no valueFrom)",
    rationale="An env entry with neither a literal value nor a reference has nothing to project.",
)
SECRET_ENV = UnsupportedFeature(
    key="secret-env",
    field="containers.*.env.*.valueFrom.secretRef",
    rationale="Secret-store references are not mapped to platform secrets.",
)
EXEC_PROBE = UnsupportedFeature(
    key="exec-probe",
    field="containers.*.livenessProbe.exec / readinessProbe.exec",
    rationale="Platform probes support HTTP and TCP checks only.",
)
PORTLESS_PROBE = UnsupportedFeature(
    key="portless-probe",
    field="containers.*.livenessProbe / readinessProbe (httpGet or tcpSocket without port)",
    rationale="Platform HTTP and TCP probes require an explicit port.",
)
CUSTOM_METRIC = UnsupportedFeature(
    key="custom-metric",
    field="autoScaling.metrics[kind not cpu/memory]",
    rationale="Only cpu and memory utilization have a built-in scaler.",
)
VOLUMES = UnsupportedFeature(
    key="volumes",
    field="containers.*.volumes",
    rationale="Volume mounts need platform storage objects the recipe does not create.",
)
WORKING_DIR = UnsupportedFeature(
    key="working-dir",
    field="containers.*.workingDir",
    rationale="The platform container schema has no working-directory field.",
)
RESTART_POLICY = UnsupportedFeature(
    key="restart-policy",
    field="containers.*.restartPolicy",
    rationale="Restart behaviour is fixed by the platform.",
)
TERMINATION_GRACE = UnsupportedFeature(
    key="termination-grace-period",
    field="containers.*.terminationGracePeriodSeconds",
    rationale="Grace period is a revision-level platform setting, not per container.",
)

UNSUPPORTED_FEATURES: tuple[UnsupportedFeature, ...] = (
    EMPTY_ENV,
    SECRET_ENV,
    EXEC_PROBE,
    PORTLESS_PROBE,
    CUSTOM_METRIC,
    VOLUMES,
    WORKING_DIR,
    RESTART_POLICY,
    TERMINATION_GRACE,
)


def detect_unsupported(context: ResourceContext) -> list[DroppedFeature]:
    """List every unsupported feature the context uses, in declaration order."""
    found: list[DroppedFeature] = []

    for name, container in context.containers.items():
        for var_name, var in container.env.items():
            if var.value_from is not None:
                found.append(DroppedFeature(SECRET_ENV.key, name, var_name))
            elif var.value is None:
                found.append(DroppedFeature(EMPTY_ENV.key, name, var_name))

        for kind, probe in (("liveness", container.liveness_probe),
                            ("readiness", container.readiness_probe)):
            if probe is None:
                continue
            check = probe_check(probe)
            if check is None:
                found.append(DroppedFeature(EXEC_PROBE.key, name, kind))
            elif check.port is None:
                found.append(DroppedFeature(PORTLESS_PROBE.key, name, kind))

        if container.volumes:
            found.append(DroppedFeature(VOLUMES.key, name, ", ".join(container.volumes)))
        if container.working_dir is not None:
            found.append(DroppedFeature(WORKING_DIR.key, name, container.working_dir))
        if container.restart_policy is not None:
            found.append(DroppedFeature(RESTART_POLICY.key, name, container.restart_policy))
        if container.termination_grace_period_seconds is not None:
            found.append(DroppedFeature(
                TERMINATION_GRACE.key, name, str(container.termination_grace_period_seconds),
            ))

    auto = context.properties.auto_scaling
    if auto is not None:
        for metric in auto.metrics:
            if metric.kind not in TRANSLATABLE_METRICS:
                found.append(DroppedFeature(CUSTOM_METRIC.key, detail=metric.kind))

    for item in found:
        logger.info(
            "Not projected: %s%s (%s)",
            item.feature,
            f" on '{item.container}'" if item.container else "",
            item.detail,
        )
    return found
