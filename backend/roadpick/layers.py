from dataclasses import dataclass, field
from typing import Callable, Iterable

from shapely.geometry import LineString, Point, mapping
from shapely.geometry.base import BaseGeometry

CLICKED_LOCATION = "clicked_location"
NODES = "nodes"
SEGMENTS = "segments"


@dataclass
class Feature:
    geometry: BaseGeometry
    properties: dict = field(default_factory=dict)

    @property
    def edge_id(self) -> int | None:
        return self.properties.get("edge_id")

    def to_geojson(self, style: Callable[[int], dict] | None = None) -> dict:
        properties = dict(self.properties)
        if style is not None and self.edge_id is not None:
            properties["style"] = style(self.edge_id)
        return {
            "type": "Feature",
            "geometry": mapping(self.geometry),
            "properties": properties,
        }


def point_feature(coordinate: tuple[float, float], **properties) -> Feature:
    return Feature(Point(coordinate), properties)


def line_feature(coordinates: list[tuple[float, float]], **properties) -> Feature:
    return Feature(LineString(coordinates), properties)


class FeatureCollection:
    """
    Mutable feature container backing one map layer.
    clear() and add_feature()/add_features() are the only mutations.
    """

    def __init__(self, name: str):
        self.name = name
        self._features: list[Feature] = []

    def clear(self) -> None:
        self._features = []

    def add_feature(self, feature: Feature) -> None:
        self._features.append(feature)

    def add_features(self, features: Iterable[Feature]) -> None:
        # Build the new list first so readers never see a half-added batch
        self._features = self._features + list(features)

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self):
        return iter(list(self._features))

    def to_geojson(self, style: Callable[[int], dict] | None = None) -> dict:
        return {
            "type": "FeatureCollection",
            "features": [f.to_geojson(style) for f in self._features],
        }
