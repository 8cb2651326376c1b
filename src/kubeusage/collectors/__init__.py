from .prometheus_executor import PrometheusQueryExecutor
from .workload_resolver import WorkloadResolver

__all__ = [
    "PrometheusQueryExecutor",
    "WorkloadResolver",
]
