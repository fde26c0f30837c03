import sys
from pathlib import Path

import polyline as polyline_codec
import pytest


# Ensure `backend/` is on sys.path so tests can import `roadpick.*`
# without an editable install.
BACKEND_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_ROOT))


def _node(lon: float, lat: float) -> dict:
    return {"node": {"lat": lat, "lon": lon}, "edge_count": 4}


def build_edge(
    shape: list[tuple[float, float]] | None = None,
    start: tuple[float, float] | None = None,
    end: tuple[float, float] | None = None,
    mid: tuple[float, float] | None = None,
) -> dict:
    """Valhalla-shaped locate edge with road_segments=true. Coordinates are (lon, lat)."""
    segment: dict = {}
    if shape is not None:
        segment["shape"] = polyline_codec.encode([(lat, lon) for lon, lat in shape], 6)
    if start is not None or end is not None:
        intersections = {}
        if start is not None:
            intersections["start_node"] = _node(*start)
        if end is not None:
            intersections["end_node"] = _node(*end)
        segment["intersections"] = intersections
    if mid is not None:
        segment["mid_point"] = {"lat": mid[1], "lon": mid[0]}
    return {
        "correlated_lat": 47.0,
        "correlated_lon": 8.0,
        "edge_id": {"value": 123456, "level": 2},
        "full_road_segment": segment,
    }


def full_edge(k: int, with_mid: bool = True) -> dict:
    base = 8.0 + k * 0.01
    return build_edge(
        shape=[(base, 47.0), (base + 0.005, 47.001), (base + 0.01, 47.002)],
        start=(base, 47.0),
        end=(base + 0.01, 47.002),
        mid=(base + 0.005, 47.001) if with_mid else None,
    )


@pytest.fixture
def make_edge():
    return build_edge


@pytest.fixture
def make_full_edge():
    return full_edge
