# src/kubeusage/models/prometheus.py
"""
Pydantic models for instant-query responses returned by the Prometheus HTTP API.
"""

import json
from typing import Any, Dict, List

from pydantic import BaseModel, Field


def _format_timestamp(timestamp: float) -> str:
    # Seconds with millisecond precision, trailing zeros dropped (1700000000, 1700000000.5).
    return f"{timestamp:.3f}".rstrip("0").rstrip(".")


class PromSample(BaseModel):
    """
    A single sample of an instant vector.
    """

    metric: Dict[str, str] = Field(default_factory=dict)
    timestamp: float
    value: str = Field(..., description="Sample value exactly as Prometheus serialised it")

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "PromSample":
        """Builds a sample from one element of ``data.result`` (``{"metric": {...}, "value": [ts, "v"]}``)."""
        timestamp, value = item["value"]
        return cls(metric=item.get("metric") or {}, timestamp=float(timestamp), value=str(value))

    def format_labels(self) -> str:
        labels = dict(self.metric)
        name = labels.pop("__name__", "")
        # Values are quoted and escaped so a newline or quote cannot break the one-line-per-sample layout.
        pairs = ", ".join(f"{key}={json.dumps(value, ensure_ascii=False)}" for key, value in sorted(labels.items()))
        return f"{name}{{{pairs}}}"

    def __str__(self) -> str:
        return f"{self.format_labels()} => {self.value} @{_format_timestamp(self.timestamp)}"


class PromVector(BaseModel):
    """
    An instant vector. ``str()`` renders one ``<labels> => <value> @<ts>`` line per sample.
    """

    samples: List[PromSample] = Field(default_factory=list)

    def __str__(self) -> str:
        return "\n".join(str(sample) for sample in self.samples)


class QueryResponse(BaseModel):
    """
    The evaluated vector together with any non-fatal warnings Prometheus attached.
    """

    vector: PromVector = Field(default_factory=PromVector)
    warnings: List[str] = Field(default_factory=list)
