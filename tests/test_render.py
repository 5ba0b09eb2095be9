"""
Tests for the render use case.
"""

from containerapp_recipe.core.models.parameters import RecipeParameters
from containerapp_recipe.core.use_cases.render import RenderResult, render_recipe


class TestRenderResult:
    def test_defaults(self):
        r = RenderResult()
        assert r.ok is True
        assert r.dropped == []

    def test_error_to_dict(self):
        r = RenderResult(error="boom")
        assert r.to_dict() == {"ok": False, "error": "boom"}


class TestRenderRecipe:
    def test_success(self, envelope, environment_id):
        result = render_recipe(envelope, RecipeParameters(environment=environment_id))
        assert result.ok
        d = result.to_dict()
        assert d["ok"] is True
        assert d["manifest"]["properties"]["configuration"]["ingress"]["targetPort"] == 8080
        assert d["result"]["values"]["fqdn"] == result.manifest.name
        assert d["dropped"] == []

    def test_missing_image_reported(self, environment_id):
        envelope = {"resource": {"name": "x", "properties": {"containers": {"main": {}}}}}
        result = render_recipe(envelope, RecipeParameters(environment=environment_id))
        assert not result.ok
        assert "image" in result.error
        assert result.manifest is None

    def test_init_only_reported(self, environment_id):
        envelope = {"resource": {"name": "x", "properties": {"containers": {
            "seed": {"image": "busybox", "initContainer": True},
        }}}}
        result = render_recipe(envelope, RecipeParameters(environment=environment_id))
        assert not result.ok
        assert "no workload container" in result.error
        assert result.manifest is None

    def test_empty_containers_reported(self, environment_id):
        envelope = {"resource": {"name": "x", "properties": {"containers": {}}}}
        result = render_recipe(envelope, RecipeParameters(environment=environment_id))
        assert not result.ok
        assert result.to_dict() == {"ok": False, "error": result.error}

    def test_portless_probe_and_unknown_metric_render(self, envelope, environment_id):
        main = envelope["resource"]["properties"]["containers"]["main"]
        main["readinessProbe"] = {"tcpSocket": {}}
        envelope["resource"]["properties"]["autoScaling"] = {
            "metrics": [{"kind": "requests"}, {"kind": "cpu"}],
        }
        result = render_recipe(envelope, RecipeParameters(environment=environment_id))
        assert result.ok
        spec = result.manifest.properties.template.containers[0]
        assert [p.type for p in spec.probes] == ["Liveness"]
        assert [r.name for r in result.manifest.properties.template.scale.rules] == ["cpu-scale-rule"]
        assert [(d.feature, d.detail) for d in result.dropped] == [
            ("portless-probe", "readiness"), ("custom-metric", "requests"),
        ]

    def test_dropped_features_listed(self, envelope, environment_id):
        envelope["resource"]["properties"]["containers"]["main"]["workingDir"] = "/srv"
        result = render_recipe(envelope, RecipeParameters(environment=environment_id))
        assert result.ok
        assert [d.feature for d in result.dropped] == ["working-dir"]
