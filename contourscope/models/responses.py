"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"
    transforms_registered: int = 0


class PointModel(BaseModel):
    x: int
    y: int


class DefectModel(BaseModel):
    start: PointModel
    end: PointModel
    depth: float
    depth_point: PointModel


class ContourResponse(BaseModel):
    label: int
    kind: str
    points: list[PointModel] = Field(default_factory=list)
    polygon: list[PointModel] = Field(default_factory=list)
    hull: list[PointModel] = Field(default_factory=list)
    defects: list[DefectModel] = Field(default_factory=list)
    area: int = 0
    features: dict[str, Any] = Field(default_factory=dict)


class AnalyzeResponse(BaseModel):
    width: int
    height: int
    contours: list[ContourResponse] = Field(default_factory=list)
    processing_time_ms: float = 0.0
    transforms_completed: int = 0
    transforms_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)
