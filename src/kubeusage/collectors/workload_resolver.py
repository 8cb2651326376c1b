# src/kubeusage/collectors/workload_resolver.py
"""
Resolves the names of the pods backing a workload from the Kubernetes API.
"""

import asyncio
import logging
from typing import List, Optional

import aiohttp
from kubernetes_asyncio import client
from kubernetes_asyncio.client.exceptions import ApiException

from ..core.exceptions import ClusterUnavailable, WorkloadNotFound
from ..core.k8s_client import create_api_client
from ..models.selection import LabelSelection, StatefulSetRef, WorkloadSelection
from ..utils.k8s_utils import format_label_selector, label_selector_to_string

logger = logging.getLogger(__name__)


def controller_owner_name(pod) -> Optional[str]:
    """
    Returns the name of the pod's controlling owner.

    The owner reference flagged ``controller: true`` wins; without one the
    first owner reference is used.
    """
    owners = pod.metadata.owner_references or []
    if not owners:
        return None
    for owner in owners:
        if owner.controller:
            return owner.name
    return owners[0].name


class WorkloadResolver:
    """
    Lists the pods of a StatefulSet or of a label selector.
    """

    def __init__(self, kubeconfig: Optional[str] = None, context: Optional[str] = None):
        self.kubeconfig = kubeconfig
        self.context = context

    async def resolve(self, namespace: str, selection: WorkloadSelection) -> List[str]:
        """
        Returns the pod names of ``selection`` in the order the API lists them.

        Raises:
            WorkloadNotFound: If the StatefulSet does not exist.
            ClusterUnavailable: If the API cannot be reached or a call fails.
        """
        api_client = await create_api_client(self.kubeconfig, self.context)
        try:
            if isinstance(selection, StatefulSetRef):
                return await self._resolve_statefulset(api_client, namespace, selection.name)
            if isinstance(selection, LabelSelection):
                return await self._resolve_selector(api_client, namespace, selection)
            raise TypeError(f"Unsupported workload selection: {selection!r}")
        except ApiException as e:
            raise ClusterUnavailable(f"Kubernetes API call failed ({e.status}): {e.reason}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ClusterUnavailable(f"Failed to reach the Kubernetes API: {e}") from e
        finally:
            await api_client.close()

    async def _resolve_statefulset(self, api_client: client.ApiClient, namespace: str, name: str) -> List[str]:
        apps_api = client.AppsV1Api(api_client)
        try:
            statefulset = await apps_api.read_namespaced_stateful_set(name=name, namespace=namespace)
        except ApiException as e:
            if e.status == 404:
                raise WorkloadNotFound(namespace, name) from e
            raise

        try:
            label_selector = label_selector_to_string(statefulset.spec.selector)
        except ValueError as e:
            raise ClusterUnavailable(f"StatefulSet '{name}' has an unusable selector: {e}") from e
        pods = await self._list_pods(api_client, namespace, label_selector)

        # Guard against unrelated pods that happen to carry the same labels.
        owned = []
        for pod in pods:
            owner = controller_owner_name(pod)
            if owner == statefulset.metadata.name:
                owned.append(pod.metadata.name)
            else:
                logger.debug("Skipping pod %s owned by %s", pod.metadata.name, owner)

        logger.debug("StatefulSet %s/%s owns %d of %d matching pod(s)", namespace, name, len(owned), len(pods))
        return owned

    async def _resolve_selector(
        self, api_client: client.ApiClient, namespace: str, selection: LabelSelection
    ) -> List[str]:
        label_selector = format_label_selector(selection.match_labels)
        pods = await self._list_pods(api_client, namespace, label_selector)
        return [pod.metadata.name for pod in pods]

    async def _list_pods(self, api_client: client.ApiClient, namespace: str, label_selector: str) -> list:
        core_api = client.CoreV1Api(api_client)
        logger.debug("Listing pods in %s with selector '%s'", namespace, label_selector)
        pod_list = await core_api.list_namespaced_pod(namespace=namespace, label_selector=label_selector)
        return list(pod_list.items)
