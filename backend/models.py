"""
Pydantic models for the heatmap render API.
Mirror van_heatmap.HeatmapSettings and Marker.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class SettingsPayload(BaseModel):
    """Host style options, using the host's option names.

    Values stay untyped; HeatmapSettings.from_mapping keeps defaults for invalid ones.
    """
    mode: Optional[Any] = None
    markerColor: Optional[Any] = None
    markerSize: Optional[Any] = None
    vanSide: Optional[Any] = None
    customColors: Optional[Any] = None  # ignored unless a list
    manualColors: Optional[Any] = None
    densityRadius: Optional[Any] = None
    markerOpacity: Optional[Any] = None
    glowSize: Optional[Any] = None
    colorMin: Optional[Any] = None
    colorMax: Optional[Any] = None
    palette: Optional[Any] = None
    strokeColor: Optional[Any] = None
    strokeOpacity: Optional[Any] = None


class RenderRequest(BaseModel):
    """Parallel value columns plus container size"""
    columns: List[List[Any]] = Field(default_factory=list)  # [[x...], [y...], [label...]]
    width: Optional[float] = None
    height: Optional[float] = None
    settings: SettingsPayload = Field(default_factory=SettingsPayload)


class MarkerData(BaseModel):
    """One rendered circle"""
    cx: float
    cy: float
    radius: float
    fill_color: str
    fill_opacity: float
    stroke_color: str
    stroke_opacity: float
    filter_id: Optional[str] = None


class DiffData(BaseModel):
    added: List[int]
    updated: List[int]
    removed: List[int]


class RenderResponse(BaseModel):
    """Response for a render request"""
    markers: List[MarkerData]
    densities: List[int]
    labels: List[str]
    diff: DiffData
    viewport: Dict[str, float]
    skipped: bool
    svg: str
