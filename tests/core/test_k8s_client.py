# tests/core/test_k8s_client.py

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from kubernetes_asyncio import config as k8s_config

from kubeusage.core.exceptions import ClusterUnavailable
from kubeusage.core.k8s_client import create_api_client


@pytest.mark.asyncio
async def test_loads_existing_kubeconfig(tmp_path):
    kubeconfig = tmp_path / "config"
    kubeconfig.write_text("apiVersion: v1\n")

    with (
        patch("kubeusage.core.k8s_client.config.load_kube_config", new=AsyncMock()) as mock_load,
        patch("kubeusage.core.k8s_client.config.load_incluster_config") as mock_incluster,
        patch("kubeusage.core.k8s_client.client.ApiClient") as mock_api_client,
    ):
        api_client = await create_api_client(str(kubeconfig), context="kind-dev")

    assert api_client is mock_api_client.return_value
    mock_load.assert_awaited_once()
    assert mock_load.await_args.kwargs["config_file"] == str(kubeconfig)
    assert mock_load.await_args.kwargs["context"] == "kind-dev"
    mock_incluster.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_kubeconfig_raises(tmp_path):
    kubeconfig = tmp_path / "config"
    kubeconfig.write_text("not: a kubeconfig\n")

    with patch(
        "kubeusage.core.k8s_client.config.load_kube_config",
        new=AsyncMock(side_effect=k8s_config.ConfigException("Invalid kube-config file")),
    ):
        with pytest.raises(ClusterUnavailable, match="Invalid kubeconfig"):
            await create_api_client(str(kubeconfig))


@pytest.mark.asyncio
async def test_missing_kubeconfig_falls_back_to_in_cluster(tmp_path):
    with (
        patch("kubeusage.core.k8s_client.config.load_kube_config", new=AsyncMock()) as mock_load,
        patch("kubeusage.core.k8s_client.config.load_incluster_config") as mock_incluster,
        patch("kubeusage.core.k8s_client.client.ApiClient", return_value=MagicMock()),
    ):
        await create_api_client(str(tmp_path / "missing"))

    mock_load.assert_not_awaited()
    mock_incluster.assert_called_once()


@pytest.mark.asyncio
async def test_no_configuration_raises_cluster_unavailable(tmp_path):
    with patch(
        "kubeusage.core.k8s_client.config.load_incluster_config",
        side_effect=k8s_config.ConfigException("Service host/port is not set."),
    ):
        with pytest.raises(ClusterUnavailable, match="not found"):
            await create_api_client(str(tmp_path / "missing"))


@pytest.mark.asyncio
async def test_corrupt_kubeconfig_raises_cluster_unavailable(tmp_path):
    kubeconfig = tmp_path / "config"
    kubeconfig.write_text("apiVersion: v1\nclusters: [\n  - : :\n")

    with pytest.raises(ClusterUnavailable, match="Invalid kubeconfig"):
        await create_api_client(str(kubeconfig))


@pytest.mark.asyncio
async def test_unreadable_kubeconfig_raises_cluster_unavailable(tmp_path):
    kubeconfig = tmp_path / "config"
    kubeconfig.write_text("apiVersion: v1\n")

    with patch(
        "kubeusage.core.k8s_client.config.load_kube_config",
        new=AsyncMock(side_effect=PermissionError("permission denied")),
    ):
        with pytest.raises(ClusterUnavailable, match="permission denied"):
            await create_api_client(str(kubeconfig))
