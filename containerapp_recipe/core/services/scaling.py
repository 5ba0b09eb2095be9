"""
Scaling rule synthesizer — autoscaling intent → platform scale block.
"""

from __future__ import annotations

import logging

from containerapp_recipe.core.models.context import ResourceProperties, ScaleMetric
from containerapp_recipe.core.models.manifest import CustomScaleRule, ScaleRule, ScaleSpec

logger = logging.getLogger(__name__)

DEFAULT_MIN_REPLICAS = 1
DEFAULT_MAX_REPLICAS = 10
DEFAULT_TARGET_UTILIZATION = 70

# Metric kinds with a built-in platform scaler.
TRANSLATABLE_METRICS = ("cpu", "memory")


def target_utilization(metric: ScaleMetric) -> int:
    if metric.target is not None and metric.target.average_utilization is not None:
        return metric.target.average_utilization
    return DEFAULT_TARGET_UTILIZATION


def build_scale_rules(metrics: list[ScaleMetric]) -> list[ScaleRule]:
    """One utilization rule per cpu/memory metric, in declaration order."""
    rules: list[ScaleRule] = []
    for metric in metrics:
        if metric.kind not in TRANSLATABLE_METRICS:
            logger.debug("Skipping '%s' scale metric", metric.kind)
            continue
        rules.append(ScaleRule(
            name=f"{metric.kind}-scale-rule",
            custom=CustomScaleRule(
                type=metric.kind,
                metadata={
                    "type": "Utilization",
                    "value": str(target_utilization(metric)),
                },
            ),
        ))
    return rules


def build_scale(properties: ResourceProperties) -> ScaleSpec:
    """Resolve replica bounds and rules.

    ``rules`` is left out (``None``) rather than emitted as ``[]`` when
    nothing is translatable.
    """
    min_replicas = (
        properties.replicas if properties.replicas is not None else DEFAULT_MIN_REPLICAS
    )
    auto = properties.auto_scaling

    if auto is not None and auto.max_replicas is not None:
        max_replicas = auto.max_replicas
    else:
        max_replicas = max(min_replicas, DEFAULT_MAX_REPLICAS)

    rules = build_scale_rules(auto.metrics) if auto is not None else []

    return ScaleSpec(
        min_replicas=min_replicas,
        max_replicas=max_replicas,
        rules=rules or None,
    )
