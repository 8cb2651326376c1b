# src/kubeusage/models/cli.py
"""
Data shared between the top-level CLI callback and the usage commands.
"""

from typing import Optional


class ConnectionOptions:
    """Cluster and Prometheus connection settings chosen on the command line."""

    def __init__(
        self,
        kubeconfig: Optional[str] = None,
        context: Optional[str] = None,
        prometheus_url: Optional[str] = None,
    ):
        self.kubeconfig = kubeconfig
        self.context = context
        self.prometheus_url = prometheus_url
