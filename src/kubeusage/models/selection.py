# src/kubeusage/models/selection.py
"""
Pydantic models describing which pods a usage query should cover.
"""

from typing import Dict, Union

from pydantic import BaseModel, Field, field_validator


class StatefulSetRef(BaseModel):
    """
    Selects the pods owned by a named StatefulSet.
    """

    name: str = Field(..., min_length=1, description="Name of the StatefulSet")

    def describe(self) -> str:
        return f"statefulset/{self.name}"


class LabelSelection(BaseModel):
    """
    Selects every pod matching a set of labels, regardless of owner.
    """

    match_labels: Dict[str, str] = Field(..., description="Label key/value pairs the pods must carry")

    @field_validator("match_labels")
    @classmethod
    def _not_empty(cls, value: Dict[str, str]) -> Dict[str, str]:
        # An empty selector would match every pod in the namespace.
        if not value:
            raise ValueError("match_labels must contain at least one label")
        return value

    def describe(self) -> str:
        return ",".join(f"{key}={value}" for key, value in sorted(self.match_labels.items()))


WorkloadSelection = Union[StatefulSetRef, LabelSelection]
