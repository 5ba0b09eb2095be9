"""
Tests for the context normalizer — envelope validation and derived names.
"""

import pytest

from containerapp_recipe.core.services.context_normalizer import (
    PLATFORM_NAME_MAX_LENGTH,
    UNIQUE_SUFFIX_LENGTH,
    RecipeInputError,
    environment_label,
    normalize_context,
    normalize_name,
    platform_name,
    unique_suffix,
)


class TestNormalizeName:
    def test_lowercases_and_replaces_underscores(self):
        assert normalize_name("Orders_API") == "orders-api"

    def test_already_normal(self):
        assert normalize_name("web") == "web"


class TestUniqueSuffix:
    def test_deterministic(self):
        assert unique_suffix("/some/id") == unique_suffix("/some/id")

    def test_differs_per_identity(self):
        assert unique_suffix("/a") != unique_suffix("/b")

    def test_length_and_charset(self):
        s = unique_suffix("/some/id")
        assert len(s) == UNIQUE_SUFFIX_LENGTH
        assert all(c in "0123456789abcdef" for c in s)


class TestPlatformName:
    def test_short_name(self):
        assert platform_name("web", "abcd1234") == "web-abcd1234"

    def test_truncated_to_budget(self):
        name = platform_name("a" * 60, "abcd1234")
        assert len(name) == PLATFORM_NAME_MAX_LENGTH
        assert name.endswith("-abcd1234")

    def test_no_double_hyphen_after_truncation(self):
        # Budget is 23 chars; position 23 is a hyphen in this stem
        stem = "x" * 22 + "-" + "y" * 10
        name = platform_name(stem, "abcd1234")
        assert "--" not in name
        assert name == "x" * 22 + "-abcd1234"

    def test_invalid_characters_removed(self):
        assert platform_name("my.app!", "abcd1234") == "myapp-abcd1234"

    def test_empty_stem_falls_back(self):
        assert platform_name("", "abcd1234") == "app-abcd1234"


class TestEnvironmentLabel:
    def test_last_segment(self):
        assert environment_label("/planes/x/environments/prod") == "prod"

    def test_trailing_slash(self):
        assert environment_label("/planes/x/environments/prod/") == "prod"

    def test_absent(self):
        assert environment_label("") == ""


class TestNormalizeContext:
    def test_sample_envelope(self, envelope):
        ctx = normalize_context(envelope)
        assert ctx.name == "Orders_API"
        assert ctx.normalized_name == "orders-api"
        assert ctx.application_name == "shop"
        assert ctx.environment_label == "prod"
        assert ctx.platform_name.startswith("orders-api-")
        assert ctx.unique_suffix == unique_suffix(envelope["resource"]["id"])
        assert list(ctx.containers) == ["main", "init"]

    def test_minimal_envelope_defaults(self):
        ctx = normalize_context({"resource": {"properties": {"containers": {"main": {"image": "a"}}}}})
        assert ctx.name == ""
        assert list(ctx.containers) == ["main"]
        assert ctx.connections == {}
        assert ctx.application_name == ""
        assert ctx.environment_label == ""

    def test_null_bags_default_to_empty(self):
        ctx = normalize_context({
            "resource": {
                "name": "x",
                "connections": None,
                "properties": {"containers": {"main": {"image": "a"}}, "connections": None},
            },
        })
        assert ctx.connections == {}
        assert ctx.properties.connections == {}

    def test_suffix_falls_back_to_name(self):
        ctx = normalize_context({
            "resource": {"name": "worker", "properties": {"containers": {"main": {"image": "a"}}}},
        })
        assert ctx.unique_suffix == unique_suffix("worker")

    def test_missing_image_is_fatal(self):
        with pytest.raises(RecipeInputError, match="image"):
            normalize_context({
                "resource": {"name": "x", "properties": {"containers": {"main": {}}}},
            })

    def test_empty_image_is_fatal(self):
        with pytest.raises(RecipeInputError):
            normalize_context({
                "resource": {"name": "x", "properties": {"containers": {"main": {"image": ""}}}},
            })

    def test_no_containers_is_fatal(self):
        with pytest.raises(RecipeInputError, match="no workload container"):
            normalize_context({"resource": {"name": "x"}})

    def test_empty_envelope_is_fatal(self):
        with pytest.raises(RecipeInputError):
            normalize_context({})

    def test_only_init_containers_is_fatal(self):
        with pytest.raises(RecipeInputError, match="no workload container"):
            normalize_context({
                "resource": {
                    "name": "x",
                    "properties": {"containers": {"init": {"image": "busybox", "initContainer": True}}},
                },
            })

    def test_context_is_frozen(self, envelope):
        ctx = normalize_context(envelope)
        with pytest.raises(Exception):
            ctx.name = "other"
