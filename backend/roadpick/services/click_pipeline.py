import logging
from typing import Awaitable, Callable

from roadpick.config import settings
from roadpick.layers import (
    CLICKED_LOCATION,
    NODES,
    SEGMENTS,
    Feature,
    FeatureCollection,
    line_feature,
    point_feature,
)
from roadpick.schemas.locate import ClickOutcome, Edge, LocateResult
from roadpick.services import polyline, valhalla_client
from roadpick.services.valhalla_client import ValhallaError, build_locate_payload

logger = logging.getLogger(__name__)

LocateFn = Callable[[dict], Awaitable[list[LocateResult]]]


def edge_features(
    edges: list[Edge], precision: int = polyline.DEFAULT_PRECISION
) -> tuple[list[Feature], list[Feature]]:
    """
    Turn located edges into (node_features, segment_features).
    edge_id is the edge's position in the response and is shared by every
    feature derived from that edge.
    """
    nodes: list[Feature] = []
    segments: list[Feature] = []

    for edge_id, edge in enumerate(edges):
        if edge.shape is not None:
            try:
                coords = polyline.decode(edge.shape, precision)
            except polyline.DecodeError as e:
                logger.warning("Skipping shape of edge %d: %s", edge_id, e)
                coords = []
            if len(coords) >= 2:
                segments.append(line_feature(coords, edge_id=edge_id))
            elif coords:
                logger.warning("Skipping shape of edge %d: single point", edge_id)

        if edge.intersections is not None:
            ends = edge.intersections
            for role, node in (
                ("start_node", ends.start_node),
                ("mid_point", edge.mid_point),
                ("end_node", ends.end_node),
            ):
                if node is not None:
                    nodes.append(point_feature(node.coordinate, edge_id=edge_id, role=role))

    return nodes, segments


class ClickQueryPipeline:
    """
    Click -> Valhalla locate -> node and segment layers.

    Each click gets a generation number; a response is only committed if no
    newer click has started since, so a slow stale response never overwrites
    a newer click's result.
    """

    def __init__(
        self,
        locate: LocateFn | None = None,
        clicked_location: FeatureCollection | None = None,
        nodes: FeatureCollection | None = None,
        segments: FeatureCollection | None = None,
        precision: int | None = None,
    ):
        self._locate = locate if locate is not None else valhalla_client.locate
        if clicked_location is None:
            clicked_location = FeatureCollection(CLICKED_LOCATION)
        self.clicked_location = clicked_location
        self.nodes = nodes if nodes is not None else FeatureCollection(NODES)
        self.segments = segments if segments is not None else FeatureCollection(SEGMENTS)
        self.precision = precision if precision is not None else settings.polyline_precision
        self._generation = 0

    async def on_click(self, coordinate: tuple[float, float]) -> ClickOutcome:
        lon, lat = coordinate
        self._generation += 1
        click_id = self._generation

        self.clicked_location.clear()
        self.clicked_location.add_feature(point_feature((lon, lat), click_id=click_id))

        payload = build_locate_payload(lat=lat, lon=lon)

        failure: ValhallaError | None = None
        try:
            results = await self._locate(payload)
        except ValhallaError as e:
            failure = e
            results = []

        if click_id != self._generation:
            logger.debug("Discarding stale response for click %d (latest %d)", click_id, self._generation)
            return ClickOutcome(click_id=click_id, status="stale")

        if failure is not None:
            logger.warning("Locate failed for click %d: %s", click_id, failure)
            return ClickOutcome(click_id=click_id, status="error", error=str(failure))

        if not results:
            logger.warning("Locate returned no results for click %d", click_id)
            return ClickOutcome(click_id=click_id, status="error", error="Empty locate response")

        edges = results[0].edges or []
        # Build both batches before touching the layers so a failure here
        # leaves the previous geometry in place
        node_batch, segment_batch = edge_features(edges, self.precision)

        self.nodes.clear()
        self.segments.clear()

        if not edges:
            return ClickOutcome(click_id=click_id, status="empty")

        self.nodes.add_features(node_batch)
        self.segments.add_features(segment_batch)

        return ClickOutcome(
            click_id=click_id,
            status="ok",
            edge_count=len(edges),
            node_count=len(node_batch),
            segment_count=len(segment_batch),
        )
