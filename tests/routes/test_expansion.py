"""Tests for exclude-list placeholder expansion."""

import pytest

from pages_routes.routes.expansion import (
    category_rules,
    claimed_categories,
    expand_placeholders,
    file_rules,
    prerendered_rules,
)
from pages_routes.routes.models import BuildOutput, Placeholder


@pytest.fixture
def build() -> BuildOutput:
    return BuildOutput(
        assets=(
            "_app/immutable/entry.js",
            "favicon.png",
            "robots.txt",
            "_headers",
            "_redirects",
        ),
        prerendered=("/about", "/old-blog", "/docs"),
        redirects=frozenset({"/old-blog"}),
        app_dir="_app",
    )


def test_file_rules_skip_app_dir_and_reserved_files(build: BuildOutput) -> None:
    assert file_rules(build) == ["/favicon.png", "/robots.txt"]


def test_file_rules_keep_paths_that_only_share_app_dir_prefix() -> None:
    build = BuildOutput(assets=("_app.css", "_application/x.js"), app_dir="_app")
    assert file_rules(build) == ["/_app.css", "/_application/x.js"]


def test_file_rules_keep_reserved_names_in_subdirectories() -> None:
    build = BuildOutput(assets=("docs/_headers",), app_dir="_app")
    assert file_rules(build) == ["/docs/_headers"]


def test_prerendered_rules_skip_redirects(build: BuildOutput) -> None:
    assert prerendered_rules(build) == ["/about", "/docs"]


def test_build_category_is_single_app_dir_rule(build: BuildOutput) -> None:
    assert category_rules(Placeholder.BUILD, build) == ["/_app/*"]


def test_category_rules_rejects_all_placeholder(build: BuildOutput) -> None:
    with pytest.raises(ValueError):
        category_rules(Placeholder.ALL, build)


def test_placeholder_parse_matches_exact_values_only() -> None:
    assert Placeholder.parse("<files>") is Placeholder.FILES
    assert Placeholder.parse("<files>/extra") is None
    assert Placeholder.parse("/<all>") is None
    assert Placeholder.parse("<ALL>") is None


def test_files_placeholder_spliced_in_place() -> None:
    build = BuildOutput(
        assets=("_app/start.js", "logo.svg", "manifest.webmanifest"),
        app_dir="_app",
    )

    result = expand_placeholders(["/keep", "<files>", "/also-keep"], build)

    assert result == ["/keep", "/logo.svg", "/manifest.webmanifest", "/also-keep"]


def test_all_placeholder_expands_in_category_order() -> None:
    build = BuildOutput(
        assets=("_app/start.js", "logo.svg"),
        prerendered=("/about",),
        app_dir="_app",
    )

    assert expand_placeholders(["<all>"], build) == ["/_app/*", "/logo.svg", "/about"]


def test_no_placeholders_means_no_auto_rules(build: BuildOutput) -> None:
    assert expand_placeholders(["/api/*", "/static/*"], build) == [
        "/api/*",
        "/static/*",
    ]


def test_empty_category_expands_to_nothing() -> None:
    build = BuildOutput(assets=("_app/start.js",), app_dir="_app")
    assert expand_placeholders(["/a", "<prerendered>", "/b"], build) == ["/a", "/b"]


def test_specific_placeholder_position_wins_over_all(build: BuildOutput) -> None:
    result = expand_placeholders(["<all>", "/mid", "<build>"], build)

    assert result == ["/favicon.png", "/robots.txt", "/about", "/docs", "/mid", "/_app/*"]


def test_category_is_never_expanded_twice(build: BuildOutput) -> None:
    result = expand_placeholders(["<build>", "<all>", "<build>", "<all>"], build)

    assert result.count("/_app/*") == 1
    assert result == ["/_app/*", "/favicon.png", "/robots.txt", "/about", "/docs"]


def test_all_marker_is_dropped_when_every_category_is_claimed(
    build: BuildOutput,
) -> None:
    result = expand_placeholders(
        ["<prerendered>", "<all>", "<files>", "<build>"], build
    )

    assert "<all>" not in result
    assert result == ["/about", "/docs", "/favicon.png", "/robots.txt", "/_app/*"]


def test_claimed_categories_ignores_all_and_literals() -> None:
    assert claimed_categories(["<all>", "/x", "<files>"]) == {Placeholder.FILES}


def test_expansion_does_not_mutate_input(build: BuildOutput) -> None:
    rules = ["<all>"]
    expand_placeholders(rules, build)
    assert rules == ["<all>"]
