# src/kubeusage/cli/main.py
"""
This module is the main entry point for the kubeusage CLI.
"""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from ..models.cli import ConnectionOptions
from . import usage

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="kubeusage",
    help="Measure the CPU, memory and storage usage of Kubernetes workloads from Prometheus.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of kubeusage.
    """
    if value:
        from .. import __version__

        typer.echo(f"kubeusage version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of kubeusage.
    """
    from .. import __version__

    typer.echo(f"kubeusage version: {__version__}")


@app.callback()
def main(
    ctx: typer.Context,
    kubeconfig: Annotated[
        Optional[str],
        typer.Option("--kubeconfig", help="Path to the kubeconfig file. Defaults to $KUBECONFIG or ~/.kube/config."),
    ] = None,
    context: Annotated[Optional[str], typer.Option("--context", help="Kubeconfig context to use.")] = None,
    prometheus_url: Annotated[
        Optional[str],
        typer.Option("--prometheus-url", help="Base URL of the Prometheus server."),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = None,
):
    """
    kubeusage CLI main entry point.
    """
    ctx.obj = ConnectionOptions(
        kubeconfig=kubeconfig or config.KUBECONFIG,
        context=context or config.KUBE_CONTEXT,
        prometheus_url=prometheus_url or config.PROMETHEUS_URL,
    )


app.command("statefulset")(usage.statefulset)
app.command("pods")(usage.pods)


if __name__ == "__main__":
    app()
