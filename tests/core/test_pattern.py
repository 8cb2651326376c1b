# tests/core/test_pattern.py
"""
Tests for the pod-name pattern compaction.
"""

import re

import pytest

from kubeusage.core.pattern import compact, longest_common_prefix


@pytest.mark.parametrize(
    "names, expected",
    [
        (["app-0", "app-1", "app-2"], "app-"),
        (["web-abc", "web-abd"], "web-ab"),
        (["db", "db-0"], "db"),
        (["same", "same"], "same"),
        (["x"], "x"),
        (["a-1", "b-1"], ""),
        ([], ""),
    ],
)
def test_longest_common_prefix(names, expected):
    assert longest_common_prefix(names) == expected


def test_compact_statefulset_pods_uses_prefix_wildcard():
    assert compact(["app-0", "app-1", "app-2"]) == "app-.*"


def test_compact_single_name_still_gets_wildcard():
    assert compact(["x"]) == "x.*"


def test_compact_empty_input_is_empty_pattern():
    assert compact([]) == ""


def test_compact_without_common_prefix_is_alternation_in_order():
    assert compact(["zeta-0", "alpha-1", "mongo-2"]) == "zeta-0|alpha-1|mongo-2"


def test_compact_prefix_is_maximal():
    # Shortest name bounds the comparison.
    assert compact(["shard0-0", "shard0-1", "shard0"]) == "shard0.*"


def test_compact_with_empty_name_falls_back_to_alternation():
    assert compact(["", "app-0"]) == "|app-0"


@pytest.mark.parametrize(
    "names",
    [
        ["app-0", "app-1", "app-2"],
        ["api-7d9f-abc", "api-7d9f-xyz", "api-5c4b-qrs"],
        ["one", "two", "three"],
        ["solo"],
    ],
)
def test_compacted_pattern_matches_every_input(names):
    pattern = re.compile(f"^(?:{compact(names)})$")
    for name in names:
        assert pattern.match(name)
