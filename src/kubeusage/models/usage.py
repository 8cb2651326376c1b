# src/kubeusage/models/usage.py

from typing import List

from pydantic import BaseModel, Field

from ..core.query_builder import MetricKind


class UsageResult(BaseModel):
    """
    The outcome of one usage query for one workload.
    """

    namespace: str
    workload: str = Field(..., description="Human readable description of the pod selection")
    metric: MetricKind
    pods: List[str] = Field(default_factory=list)
    pattern: str
    query: str
    value: float = Field(..., description="Sum of all samples, unitless (cores or bytes)")
