"""
Tests for ingress selection and the Dapr sidecar configurator.
"""

from containerapp_recipe.core.services.context_normalizer import normalize_context
from containerapp_recipe.core.services.dapr import build_dapr
from containerapp_recipe.core.services.ingress import build_ingress, select_ingress_port


def _context(containers: dict, extensions: dict | None = None):
    props = {"containers": containers}
    if extensions is not None:
        props["extensions"] = extensions
    return normalize_context({"resource": {"name": "Orders_API", "properties": props}})


class TestSelectIngressPort:
    def test_first_container_with_ports_wins(self):
        ctx = _context({
            "worker": {"image": "w"},
            "web": {"image": "a", "ports": {"http": {"containerPort": 8080}, "admin": {"containerPort": 9090}}},
            "api": {"image": "b", "ports": {"http": {"containerPort": 3000}}},
        })
        assert select_ingress_port(ctx.containers) == 8080

    def test_no_ports(self):
        ctx = _context({"worker": {"image": "w"}})
        assert select_ingress_port(ctx.containers) is None


class TestBuildIngress:
    def test_internal_by_default(self):
        assert build_ingress(8080).to_dict() == {
            "external": False, "targetPort": 8080, "transport": "auto",
        }

    def test_external(self):
        assert build_ingress(80, external=True).external is True

    def test_none(self):
        assert build_ingress(None) is None


class TestBuildDapr:
    def test_absent_extension(self):
        ctx = _context({"web": {"image": "a"}})
        assert build_dapr(ctx, 8080) is None

    def test_defaults_from_context(self):
        ctx = _context({"web": {"image": "a"}}, {"daprSidecar": {}})
        assert build_dapr(ctx, 8080).to_dict() == {
            "enabled": True, "appId": "orders-api", "appPort": 8080, "appProtocol": "http",
        }

    def test_empty_app_id_uses_name(self):
        ctx = _context({"web": {"image": "a"}}, {"daprSidecar": {"appId": ""}})
        assert build_dapr(ctx, None).app_id == "orders-api"

    def test_explicit_values(self):
        ctx = _context({"web": {"image": "a"}}, {"daprSidecar": {"appId": "orders", "appPort": 5000}})
        dapr = build_dapr(ctx, 8080)
        assert (dapr.app_id, dapr.app_port) == ("orders", 5000)

    def test_no_port_without_ingress(self):
        ctx = _context({"web": {"image": "a"}}, {"daprSidecar": {"appId": "orders"}})
        assert "appPort" not in build_dapr(ctx, None).to_dict()
