"""FastAPI route definitions."""

from __future__ import annotations
from typing import Any

from fastapi import APIRouter, Body

from roofmetrics.models import RoofMetrics, MaterialRequirements, RoofReport, MaterialOrder
from roofmetrics.services.roof_service import RoofService
from roofmetrics.api.schemas import (
    MaterialsRequest, ReportRequest, OrderRequest, MaterialInfo,
)

router = APIRouter()

# Shared service instance
_service = RoofService()


@router.post("/metrics", response_model=RoofMetrics)
async def measure_roof(insight: dict[str, Any] = Body(...)) -> RoofMetrics:
    """Aggregate a building-insight payload into roof metrics."""
    return _service.measure(insight)


@router.post("/materials", response_model=MaterialRequirements)
async def estimate_materials(request: MaterialsRequest) -> MaterialRequirements:
    """Estimate material quantities from roof metrics."""
    return _service.estimate(request.metrics, request.params)


@router.post("/report", response_model=RoofReport)
async def roof_report(request: ReportRequest) -> RoofReport:
    """Metrics, materials and waste table in one call."""
    return _service.report(request.insight, request.params)


@router.post("/orders", response_model=MaterialOrder)
async def material_order(request: OrderRequest) -> MaterialOrder:
    """Purchasable bundles, rolls, pieces and boxes for the roof."""
    return _service.order(request.metrics, request.params)


@router.get("/materials", response_model=list[MaterialInfo])
async def list_materials() -> list[MaterialInfo]:
    """List all registered material rules."""
    return [MaterialInfo(**m) for m in _service.list_materials()]


@router.get("/pitches")
async def list_pitches() -> dict[str, float]:
    return _service.list_pitches()


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
