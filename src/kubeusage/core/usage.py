# src/kubeusage/core/usage.py
"""
Runs the full usage pipeline for one workload:
pods -> name pattern -> PromQL -> instant query -> scalar.
"""

import logging

from ..collectors.prometheus_executor import PrometheusQueryExecutor
from ..collectors.workload_resolver import WorkloadResolver
from ..models.selection import WorkloadSelection
from ..models.usage import UsageResult
from .pattern import compact
from .query_builder import MetricKind, build_query

logger = logging.getLogger(__name__)


class UsageService:
    """
    Measures the resource usage of a workload. Each stage finishes before
    the next one starts and nothing is kept between calls.
    """

    def __init__(self, resolver: WorkloadResolver, executor: PrometheusQueryExecutor):
        self.resolver = resolver
        self.executor = executor

    async def measure(self, namespace: str, selection: WorkloadSelection, kind: MetricKind) -> UsageResult:
        kind = MetricKind(kind)
        pods = await self.resolver.resolve(namespace, selection)
        if not pods:
            logger.warning("No pods found for %s in namespace %s", selection.describe(), namespace)

        pattern = compact(pods)
        query = build_query(namespace, pattern, kind)
        logger.info("Running query: %s", query)

        value = await self.executor.execute(query)
        return UsageResult(
            namespace=namespace,
            workload=selection.describe(),
            metric=kind,
            pods=pods,
            pattern=pattern,
            query=query,
            value=value,
        )
