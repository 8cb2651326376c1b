# src/kubeusage/__init__.py
"""
kubeusage: aggregate CPU, memory and storage usage of a Kubernetes workload
straight from Prometheus.
"""

__version__ = "0.1.0"
