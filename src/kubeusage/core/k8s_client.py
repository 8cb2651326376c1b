import logging
import os
from typing import Optional

import yaml
from kubernetes_asyncio import client, config

from .exceptions import ClusterUnavailable

logger = logging.getLogger(__name__)


async def create_api_client(kubeconfig: Optional[str] = None, context: Optional[str] = None) -> client.ApiClient:
    """
    Builds a fresh Kubernetes ApiClient.

    The kubeconfig file is used when it exists; otherwise the in-cluster
    service account configuration is tried. The caller owns the returned
    client and must close it.

    Raises:
        ClusterUnavailable: If no configuration could be loaded.
    """
    configuration = client.Configuration()

    if kubeconfig and os.path.exists(kubeconfig):
        try:
            logger.debug("Loading kubeconfig from %s", kubeconfig)
            await config.load_kube_config(
                config_file=kubeconfig,
                context=context,
                client_configuration=configuration,
            )
            logger.debug("Loaded Kubernetes configuration from %s.", kubeconfig)
            return client.ApiClient(configuration=configuration)
        except (config.ConfigException, yaml.YAMLError, OSError) as e:
            raise ClusterUnavailable(f"Invalid kubeconfig '{kubeconfig}': {e}") from e

    try:
        logger.debug("Attempting to load in-cluster Kubernetes config...")
        config.load_incluster_config(client_configuration=configuration)
        logger.debug("Loaded in-cluster Kubernetes configuration.")
        return client.ApiClient(configuration=configuration)
    except config.ConfigException as e:
        where = f"kubeconfig '{kubeconfig}' not found and " if kubeconfig else ""
        raise ClusterUnavailable(
            f"Could not load Kubernetes configuration: {where}in-cluster config unavailable ({e})"
        ) from e
