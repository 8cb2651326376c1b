# src/kubeusage/collectors/prometheus_executor.py

"""
PrometheusQueryExecutor evaluates a single instant query and reduces the
resulting vector to one number.
"""

import logging
import time
from typing import Optional

import httpx
from pydantic import ValidationError

from ..core.config import Config
from ..core.exceptions import BackendQueryError, BackendUnavailable
from ..models.prometheus import PromSample, PromVector, QueryResponse
from ..parsers.vector_parser import parse_vector_text
from ..utils.http_client import get_async_http_client

logger = logging.getLogger(__name__)


class PrometheusQueryExecutor:
    """
    Runs instant queries against the Prometheus HTTP API.
    """

    def __init__(self, settings: Config, base_url: Optional[str] = None):
        self.settings = settings
        self.base_url = base_url or settings.PROMETHEUS_URL

        self.verify = getattr(settings, "PROMETHEUS_VERIFY_CERTS", True)
        self.bearer_token = getattr(settings, "PROMETHEUS_BEARER_TOKEN", None)
        self.username = getattr(settings, "PROMETHEUS_USERNAME", None)
        self.password = getattr(settings, "PROMETHEUS_PASSWORD", None)

    @property
    def query_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/api/v1/query"

    def _client(self) -> httpx.AsyncClient:
        headers = {}
        if self.bearer_token:
            headers["Authorization"] = f"Bearer {self.bearer_token}"

        auth = None
        if self.username and self.password:
            auth = (self.username, self.password)

        return get_async_http_client(verify=self.verify, auth=auth, headers=headers)

    async def query(self, query: str, at: Optional[float] = None) -> QueryResponse:
        """
        Evaluates ``query`` at ``at`` (unix seconds, defaults to now).

        Raises:
            BackendUnavailable: If Prometheus cannot be reached.
            BackendQueryError: If Prometheus reports an error or returns
                something other than an instant vector.
        """
        evaluation_time = at if at is not None else time.time()
        params = {"query": query, "time": f"{evaluation_time:.3f}"}

        async with self._client() as client:
            try:
                logger.debug("Querying Prometheus at %s", self.query_url)
                response = await client.get(self.query_url, params=params)
            except httpx.HTTPError as e:
                raise BackendUnavailable(f"Failed to connect to Prometheus at {self.query_url}: {e}") from e

        # Prometheus answers bad queries with 400/422 and a JSON error body, so decode before checking the status.
        try:
            data = response.json()
        except ValueError as e:
            logger.debug("Raw response content from %s: %s", self.query_url, response.text[:500])
            raise BackendQueryError(
                f"Prometheus at {self.query_url} returned a non-JSON response (HTTP {response.status_code})"
            ) from e

        if not isinstance(data, dict):
            raise BackendQueryError(
                f"Prometheus at {self.query_url} returned an unexpected response body (HTTP {response.status_code})"
            )

        if data.get("status") != "success":
            raise BackendQueryError(
                data.get("error", f"HTTP {response.status_code}"),
                error_type=data.get("errorType"),
            )

        warnings = data.get("warnings") or []
        if not isinstance(warnings, list):
            warnings = [warnings]
        warnings = [str(warning) for warning in warnings]
        for warning in warnings:
            logger.warning("Prometheus warning: %s", warning)

        result = data.get("data") or {}
        if not isinstance(result, dict):
            raise BackendQueryError(f"Prometheus returned an unexpected 'data' field: {result!r}")
        result_type = result.get("resultType")
        if result_type != "vector":
            raise BackendQueryError(f"Expected an instant vector, got result type '{result_type}'")

        try:
            samples = [PromSample.from_api(item) for item in result.get("result") or []]
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            raise BackendQueryError(f"Prometheus returned an unreadable vector: {e}") from e

        logger.debug("Prometheus returned %d sample(s)", len(samples))
        return QueryResponse(vector=PromVector(samples=samples), warnings=warnings)

    async def execute(self, query: str, at: Optional[float] = None) -> float:
        """
        Evaluates ``query`` and returns the sum of all sample values.
        """
        response = await self.query(query, at=at)
        return parse_vector_text(str(response.vector))
