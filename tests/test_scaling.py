"""
Tests for the scaling rule synthesizer.
"""

from containerapp_recipe.core.models.context import ResourceProperties
from containerapp_recipe.core.services.scaling import build_scale


def _props(**kw) -> ResourceProperties:
    return ResourceProperties.model_validate(kw)


class TestBuildScale:
    def test_defaults(self):
        assert build_scale(_props()).to_dict() == {"minReplicas": 1, "maxReplicas": 10}

    def test_replicas_above_default_max(self):
        scale = build_scale(_props(replicas=12))
        assert (scale.min_replicas, scale.max_replicas) == (12, 12)

    def test_explicit_max(self):
        scale = build_scale(_props(replicas=2, autoScaling={"maxReplicas": 5}))
        assert (scale.min_replicas, scale.max_replicas) == (2, 5)

    def test_cpu_and_memory_rules(self):
        scale = build_scale(_props(autoScaling={
            "maxReplicas": 4,
            "metrics": [
                {"kind": "cpu", "target": {"averageUtilization": 55}},
                {"kind": "memory"},
            ],
        }))
        assert scale.to_dict()["rules"] == [
            {
                "name": "cpu-scale-rule",
                "custom": {"type": "cpu", "metadata": {"type": "Utilization", "value": "55"}},
            },
            {
                "name": "memory-scale-rule",
                "custom": {"type": "memory", "metadata": {"type": "Utilization", "value": "70"}},
            },
        ]

    def test_custom_metric_dropped(self):
        scale = build_scale(_props(autoScaling={
            "metrics": [{"kind": "custom"}, {"kind": "cpu"}],
        }))
        assert [r.name for r in scale.rules] == ["cpu-scale-rule"]

    def test_unrecognized_kind_skipped(self):
        scale = build_scale(_props(autoScaling={
            "metrics": [{"kind": "requests"}, {"kind": "memory"}],
        }))
        assert [r.name for r in scale.rules] == ["memory-scale-rule"]

    def test_rules_omitted_when_none_translatable(self):
        scale = build_scale(_props(autoScaling={"metrics": [{"kind": "custom"}]}))
        assert scale.rules is None
        assert "rules" not in scale.to_dict()
