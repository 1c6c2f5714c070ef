"""
Domain models for insight-cli.

Both models are frozen: records are created by a source, reports by the
report builder, and neither is mutated afterwards. Field names double as the
keys of the serialized JSON report.
"""
from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    A single data point.
    """

    id: int = Field(..., ge=0, description="Numeric identifier (not required to be unique).")
    value: float = Field(..., description="Measured value.")
    category: str = Field(..., description="Categorical label used for grouping.")

    model_config = {
        "frozen": True,
    }


class Report(BaseModel):
    """
    A titled bundle of records plus named summary metrics.
    """

    title: str = Field(..., description="Human readable title, e.g. 'SUMMARY Report'.")
    author: str = Field(..., description="Report author.")
    timestamp: str = Field(..., description="Creation time, RFC3339 formatted.")
    data: List[Record] = Field(default_factory=list, description="Records covered by the report.")
    summary: Dict[str, float] = Field(
        default_factory=dict, description="Metric name to value (e.g. total_items, avg_value)."
    )

    model_config = {
        "frozen": True,
    }


__all__ = ["Record", "Report"]
