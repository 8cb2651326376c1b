# tests/conftest.py

import pytest


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to isolate tests from the caller's environment.

    Runs automatically for every test so no real kubeconfig or Prometheus
    credentials leak into the code under test.
    """
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("PROMETHEUS_BEARER_TOKEN", raising=False)
    monkeypatch.delenv("PROMETHEUS_USERNAME", raising=False)
    monkeypatch.delenv("PROMETHEUS_PASSWORD", raising=False)
    monkeypatch.delenv("KUBE_CONTEXT", raising=False)


@pytest.fixture
def settings():
    """A fresh Config pointing at a fake Prometheus."""
    from kubeusage.core.config import Config

    cfg = Config()
    cfg.PROMETHEUS_URL = "http://prometheus.test:9090/"
    cfg.PROMETHEUS_VERIFY_CERTS = True
    return cfg
