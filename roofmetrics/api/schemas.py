"""API request/response schemas."""

from __future__ import annotations
from typing import Any
from pydantic import BaseModel

from roofmetrics.models import RoofMetrics, EstimationParams, OrderParams


class MaterialsRequest(BaseModel):
    """Request body for the /materials endpoint."""
    metrics: RoofMetrics
    params: EstimationParams = EstimationParams()


class ReportRequest(BaseModel):
    """Request body for the /report endpoint."""
    insight: dict[str, Any]
    params: EstimationParams = EstimationParams()


class OrderRequest(BaseModel):
    """Request body for the /orders endpoint."""
    metrics: RoofMetrics
    params: OrderParams = OrderParams()


class MaterialInfo(BaseModel):
    id: str
    name: str
