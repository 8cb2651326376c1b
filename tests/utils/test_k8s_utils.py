# tests/utils/test_k8s_utils.py

import pytest
from kubernetes_asyncio.client import models as k8s

from kubeusage.utils.k8s_utils import (
    format_label_selector,
    format_selector_requirement,
    label_selector_to_string,
)


def test_format_label_selector_sorts_keys():
    assert format_label_selector({"b": "2", "a": "1"}) == "a=1,b=2"


def test_format_label_selector_empty():
    assert format_label_selector({}) == ""
    assert format_label_selector(None) == ""


@pytest.mark.parametrize(
    "operator, values, expected",
    [
        ("In", ["a", "b"], "tier in (a,b)"),
        ("NotIn", ["c"], "tier notin (c)"),
        ("Exists", None, "tier"),
        ("DoesNotExist", None, "!tier"),
    ],
)
def test_format_selector_requirement(operator, values, expected):
    assert format_selector_requirement("tier", operator, values) == expected


def test_format_selector_requirement_rejects_unknown_operator():
    with pytest.raises(ValueError):
        format_selector_requirement("tier", "Gt", ["1"])


def test_label_selector_to_string_combines_labels_and_expressions():
    selector = k8s.V1LabelSelector(
        match_labels={"app": "db"},
        match_expressions=[k8s.V1LabelSelectorRequirement(key="canary", operator="DoesNotExist")],
    )
    assert label_selector_to_string(selector) == "app=db,!canary"


def test_label_selector_to_string_none():
    assert label_selector_to_string(None) == ""
