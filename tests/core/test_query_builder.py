# tests/core/test_query_builder.py

import pytest

from kubeusage.core.query_builder import MetricKind, build_query


def test_cpu_query():
    query = build_query("demo", "app-.*", MetricKind.CPU)
    assert query == (
        "sum(node_namespace_pod_container:container_cpu_usage_seconds_total:sum_irate"
        '{namespace="demo", pod=~"app-.*", container!=""})'
    )


def test_memory_query():
    query = build_query("demo", "app-.*", MetricKind.MEMORY)
    assert query == 'sum(container_memory_working_set_bytes{namespace="demo", pod=~"app-.*", container!="", image!=""})'


def test_storage_query_is_an_average():
    query = build_query("demo", "a|b", MetricKind.STORAGE)
    assert query == 'avg(container_blkio_device_usage_total{namespace="demo", pod=~"a|b"})'


def test_kind_accepts_plain_strings():
    assert build_query("ns", "p.*", "memory") == build_query("ns", "p.*", MetricKind.MEMORY)


def test_pattern_is_not_validated():
    # Invalid regexes are left for Prometheus to reject.
    query = build_query("ns", "broken(", MetricKind.CPU)
    assert 'pod=~"broken("' in query


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        build_query("ns", "p.*", "network")
