# src/kubeusage/core/query_builder.py
"""
PromQL templates for the supported workload metrics.
"""

from enum import Enum


class MetricKind(str, Enum):
    CPU = "cpu"
    MEMORY = "memory"
    STORAGE = "storage"


# Recording rule shipped with kube-prometheus; value is in cores.
CPU_QUERY_TEMPLATE = (
    "sum(node_namespace_pod_container:container_cpu_usage_seconds_total:sum_irate"
    '{{namespace="{namespace}", pod=~"{pattern}", container!=""}})'
)
# Value is in bytes; image!="" drops the pod-level cgroup series.
MEMORY_QUERY_TEMPLATE = (
    'sum(container_memory_working_set_bytes{{namespace="{namespace}", pod=~"{pattern}", container!="", image!=""}})'
)
# Value is in bytes.
STORAGE_QUERY_TEMPLATE = 'avg(container_blkio_device_usage_total{{namespace="{namespace}", pod=~"{pattern}"}})'

QUERY_TEMPLATES = {
    MetricKind.CPU: CPU_QUERY_TEMPLATE,
    MetricKind.MEMORY: MEMORY_QUERY_TEMPLATE,
    MetricKind.STORAGE: STORAGE_QUERY_TEMPLATE,
}


def build_query(namespace: str, pattern: str, kind: MetricKind) -> str:
    """
    Renders the query for ``kind``.

    ``pattern`` is substituted as-is; an invalid regex is only reported by
    Prometheus when the query runs.
    """
    template = QUERY_TEMPLATES[MetricKind(kind)]
    return template.format(namespace=namespace, pattern=pattern)
