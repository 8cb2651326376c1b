# src/kubeusage/reporters/console_reporter.py
"""
A reporter that displays usage results in a formatted table in the console.
"""

import logging
from typing import List, Tuple

from rich.console import Console
from rich.table import Table

from ..core.query_builder import MetricKind
from ..models.usage import UsageResult

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024


def display_value(result: UsageResult) -> Tuple[float, str]:
    """Converts a raw result to the unit it is shown in: cores for CPU, MB for memory and storage."""
    if result.metric == MetricKind.CPU:
        return result.value, "cores"
    return result.value / BYTES_PER_MB, "MB"


class ConsoleReporter:
    """
    Renders usage results to the console using the 'rich' library.
    """

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def report(self, results: List[UsageResult], show_query: bool = False):
        if not results:
            self.console.print("No data to report.", style="yellow")
            return

        table = Table(
            title="Workload Resource Usage",
            header_style="bold magenta",
            show_lines=True,
        )
        table.add_column("Namespace", style="cyan")
        table.add_column("Workload", style="cyan")
        table.add_column("Metric", style="bold")
        table.add_column("Pods", style="blue", justify="right")
        table.add_column("Value", style="green", justify="right")
        table.add_column("Unit", style="dim")
        if show_query:
            table.add_column("Query", style="dim")

        for result in results:
            value, unit = display_value(result)
            row = [
                result.namespace,
                result.workload,
                result.metric.value,
                str(len(result.pods)),
                f"{value:.4f}" if unit == "cores" else f"{value:.2f}",
                unit,
            ]
            if show_query:
                row.append(result.query)
            table.add_row(*row)

        self.console.print(table)
