"""Tests for route data models."""

from pages_routes.routes.models import (
    CATEGORY_ORDER,
    Placeholder,
    RoutesConfig,
    RoutesSpec,
)


def test_config_defaults() -> None:
    config = RoutesConfig()
    assert config.include == ("/*",)
    assert config.exclude == ("<all>",)


def test_config_from_dict_keeps_explicit_empty_lists() -> None:
    config = RoutesConfig.from_dict({"include": [], "exclude": []})
    assert config.include == ()
    assert config.exclude == ()


def test_config_from_dict_fills_missing_keys() -> None:
    config = RoutesConfig.from_dict({"exclude": ["/static/*"]})
    assert config.include == ("/*",)
    assert config.exclude == ("/static/*",)


def test_category_order() -> None:
    assert CATEGORY_ORDER == (
        Placeholder.BUILD,
        Placeholder.FILES,
        Placeholder.PRERENDERED,
    )


def test_spec_equality_ignores_warnings() -> None:
    first = RoutesSpec(include=("/*",), exclude=(), warnings=("trimmed",))
    second = RoutesSpec(include=("/*",), exclude=())
    assert first == second
    assert first.rule_count == 1
