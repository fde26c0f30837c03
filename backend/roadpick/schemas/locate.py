from typing import Literal

from pydantic import BaseModel, Field, model_validator


class Location(BaseModel):
    lat: float
    lon: float


class LocateRequest(BaseModel):
    locations: list[Location]
    costing: str = "auto"
    verbose: bool = True
    road_segments: bool = True
    radius: int | None = None
    node_snap_tolerance: int | None = None


class NodePoint(BaseModel):
    """A node coordinate, either bare or wrapped as Valhalla's {"node": {...}}."""

    lat: float
    lon: float

    @model_validator(mode="before")
    @classmethod
    def _unwrap_node(cls, data):
        if isinstance(data, dict) and isinstance(data.get("node"), dict):
            return data["node"]
        return data

    @property
    def coordinate(self) -> tuple[float, float]:
        return (self.lon, self.lat)


class Intersections(BaseModel):
    start_node: NodePoint | None = None
    end_node: NodePoint | None = None


class Edge(BaseModel):
    shape: str | None = None
    intersections: Intersections | None = None
    mid_point: NodePoint | None = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_road_segment(cls, data):
        # road_segments=true nests the geometry under full_road_segment
        if isinstance(data, dict) and isinstance(data.get("full_road_segment"), dict):
            merged = dict(data["full_road_segment"])
            for key in ("shape", "intersections", "mid_point"):
                if data.get(key) is not None:
                    merged.setdefault(key, data[key])
            return merged
        return data


class LocateResult(BaseModel):
    edges: list[Edge] | None = None


class ClickRequest(BaseModel):
    lon: float = Field(..., ge=-180, le=180)
    lat: float = Field(..., ge=-90, le=90)


class ClickOutcome(BaseModel):
    click_id: int
    status: Literal["ok", "empty", "stale", "error"]
    edge_count: int = 0
    node_count: int = 0
    segment_count: int = 0
    error: str | None = None
