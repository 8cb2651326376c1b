import asyncio
import logging
from typing import Dict, List, Optional

import typer

from ..collectors.prometheus_executor import PrometheusQueryExecutor
from ..collectors.workload_resolver import WorkloadResolver
from ..core.config import config
from ..core.exceptions import KubeUsageError
from ..core.query_builder import MetricKind
from ..core.usage import UsageService
from ..models.cli import ConnectionOptions
from ..models.selection import WorkloadSelection
from ..models.usage import UsageResult
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)


def parse_label_options(options: Optional[List[str]]) -> Dict[str, str]:
    """
    Parses ``-l`` values (``key=value``, possibly comma separated) into a dict.
    """
    labels: Dict[str, str] = {}
    for option in options or []:
        for entry in option.split(","):
            entry = entry.strip()
            if not entry:
                continue
            key, sep, value = entry.partition("=")
            if not sep or not key.strip():
                raise typer.BadParameter(f"Invalid label '{entry}'. Use the format 'key=value'.")
            labels[key.strip()] = value.strip()
    return labels


def get_usage_service(options: ConnectionOptions) -> UsageService:
    resolver = WorkloadResolver(kubeconfig=options.kubeconfig, context=options.context)
    executor = PrometheusQueryExecutor(config, base_url=options.prometheus_url)
    return UsageService(resolver, executor)


async def measure_all(
    service: UsageService,
    namespace: str,
    selection: WorkloadSelection,
    metrics: List[MetricKind],
) -> List[UsageResult]:
    """Measures each metric in turn; the first failure aborts the whole run."""
    results = []
    for kind in metrics:
        results.append(await service.measure(namespace, selection, kind))
    return results


def run_usage_report(
    options: ConnectionOptions,
    namespace: str,
    selection: WorkloadSelection,
    metrics: List[MetricKind],
    show_query: bool = False,
) -> None:
    """
    Runs the usage pipeline and prints the results. Any pipeline failure ends
    the command with exit code 1.
    """
    service = get_usage_service(options)
    try:
        results = asyncio.run(measure_all(service, namespace, selection, metrics))
    except KubeUsageError as e:
        logger.error("Failed to measure %s in namespace %s: %s", selection.describe(), namespace, e)
        raise typer.Exit(code=1)

    ConsoleReporter().report(results, show_query=show_query)
