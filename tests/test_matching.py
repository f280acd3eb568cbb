"""Tests for workspace glob matching."""

import pytest

from pm_detector.matching import expand_braces, matches


@pytest.mark.parametrize(
    "path, patterns",
    [
        ("package", ["package"]),
        ("workspaces/workspace-a", ["package", "workspaces/*"]),
        ("not-workspace", ["**"]),
        ("deeply/nested/dir", ["**"]),
        ("packages/a/b", ["packages/**"]),
        ("packages", ["packages/**"]),
        ("apps/web/pkg", ["**/pkg"]),
        ("pkg", ["**/pkg"]),
        ("packages/app-1", ["packages/app-?"]),
        ("packages/b", ["packages/[abc]"]),
        ("packages/d", ["packages/[!abc]"]),
        ("apps/web", ["{apps,libs}/*"]),
        ("libs/core", ["{apps,libs}/*"]),
        ("apps/web", ["{apps/*,libs}"]),
        ("libs", ["{apps/*,libs}"]),
        ("tools/a/b", ["{apps,tools/{a,c}}/*"]),
        ("./packages/a", ["packages/*"]),
        ("packages/a", ["./packages/*"]),
        ("packages/.hidden", ["packages/.*"]),
    ],
)
def test_matches(path, patterns):
    assert matches(path, patterns)


@pytest.mark.parametrize(
    "path, patterns",
    [
        ("not-workspace", ["package", "workspaces/*"]),
        ("workspaces/a/b", ["workspaces/*"]),
        ("workspaces", ["workspaces/*"]),
        ("packages/d", ["packages/[abc]"]),
        ("tools/x", ["{apps,libs}/*"]),
        ("packages/.hidden", ["packages/*"]),
        (".cache/x", ["**"]),
        ("anything", []),
        ("package-extra", ["package"]),
    ],
)
def test_does_not_match(path, patterns):
    assert not matches(path, patterns)


def test_any_pattern_is_enough():
    patterns = ["packages/*", "!packages/legacy"]
    assert matches("packages/app", patterns)
    assert matches("packages/legacy", patterns)


def test_negated_pattern_alone():
    assert matches("packages/app", ["!packages/legacy"])
    assert not matches("packages/legacy", ["!packages/legacy"])


def test_expand_braces():
    assert expand_braces("{apps/*,libs}") == ["apps/*", "libs"]
    assert expand_braces("a/{b,{c,d}}/e") == ["a/b/e", "a/c/e", "a/d/e"]
    assert expand_braces("{single}/x") == ["{single}/x"]


def test_braces_with_separator_do_not_overmatch():
    assert not matches("apps", ["{apps/*,libs}"])
    assert not matches("libs/core", ["{apps/*,libs}"])
