# src/kubeusage/cli/usage.py
"""
Implements the `statefulset` and `pods` commands.
"""

import logging
from typing import List, Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ..core.query_builder import MetricKind
from ..models.selection import LabelSelection, StatefulSetRef
from .utils import parse_label_options, run_usage_report

logger = logging.getLogger(__name__)

NamespaceOption = Annotated[str, typer.Option("--namespace", "-n", help="Namespace of the workload.")]
MetricOption = Annotated[
    Optional[List[MetricKind]],
    typer.Option("--metric", "-m", help="Metric to measure. Repeat for several.", case_sensitive=False),
]
ShowQueryOption = Annotated[bool, typer.Option("--show-query", help="Show the PromQL query of each result.")]


def statefulset(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Name of the StatefulSet.")],
    namespace: NamespaceOption = "default",
    metric: MetricOption = None,
    show_query: ShowQueryOption = False,
):
    """
    Measure the usage of the pods owned by a StatefulSet (CPU by default).
    """
    try:
        selection = StatefulSetRef(name=name)
    except ValidationError:
        raise typer.BadParameter("The StatefulSet name must not be empty.", param_hint="'NAME'")

    metrics = metric or [MetricKind.CPU]
    run_usage_report(ctx.obj, namespace, selection, metrics, show_query=show_query)


def pods(
    ctx: typer.Context,
    label: Annotated[
        List[str],
        typer.Option("--selector", "-l", help="Label selector 'key=value'. Repeat or comma separate."),
    ],
    namespace: NamespaceOption = "default",
    metric: MetricOption = None,
    show_query: ShowQueryOption = False,
):
    """
    Measure the usage of every pod matching a label selector (CPU, memory and storage by default).
    """
    try:
        selection = LabelSelection(match_labels=parse_label_options(label))
    except ValidationError:
        raise typer.BadParameter("At least one label is required.", param_hint="'--selector'")

    metrics = metric or [MetricKind.CPU, MetricKind.MEMORY, MetricKind.STORAGE]
    run_usage_report(ctx.obj, namespace, selection, metrics, show_query=show_query)
