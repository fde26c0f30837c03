import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from roadpick.config import settings
from roadpick.schemas.locate import LocateRequest, LocateResult, Location

logger = logging.getLogger(__name__)


class ValhallaError(Exception):
    pass


_results_adapter = TypeAdapter(list[LocateResult])


def build_locate_payload(
    lat: float,
    lon: float,
    costing: str | None = None,
    radius: int | None = None,
    node_snap_tolerance: int | None = None,
) -> dict:
    """Request body for /locate with full road segment detail for one location."""
    request = LocateRequest(
        locations=[Location(lat=lat, lon=lon)],
        costing=costing or settings.costing,
        radius=radius if radius is not None else settings.locate_radius,
        node_snap_tolerance=(
            node_snap_tolerance if node_snap_tolerance is not None else settings.node_snap_tolerance
        ),
    )
    # Valhalla rejects explicit nulls for the tuning knobs
    return request.model_dump(exclude_none=True)


def parse_locate_response(data) -> list[LocateResult]:
    """Validate a /locate body: a non-empty array, one element per location."""
    if not isinstance(data, list) or not data:
        raise ValhallaError(f"Unexpected locate response: {str(data)[:200]}")
    try:
        return _results_adapter.validate_python(data)
    except ValidationError as e:
        raise ValhallaError(f"Malformed locate response: {e.error_count()} validation error(s)") from e


async def locate(
    payload: dict,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[LocateResult]:
    """
    Post a locate request (see build_locate_payload) to Valhalla.
    Returns one LocateResult per requested location.
    """
    try:
        async with httpx.AsyncClient(timeout=settings.valhalla_timeout, transport=transport) as client:
            resp = await client.post(f"{settings.valhalla_url}/locate", json=payload)
    except httpx.TimeoutException as e:
        raise ValhallaError("Valhalla locate timeout") from e
    except httpx.HTTPError as e:
        raise ValhallaError(f"Valhalla unreachable: {e}") from e

    if resp.status_code != 200:
        raise ValhallaError(f"Valhalla error {resp.status_code}: {resp.text[:200]}")

    try:
        data = resp.json()
    except ValueError as e:
        raise ValhallaError("Valhalla returned a non-JSON body") from e

    return parse_locate_response(data)


async def check_status(transport: httpx.AsyncBaseTransport | None = None) -> bool:
    try:
        async with httpx.AsyncClient(timeout=5.0, transport=transport) as client:
            resp = await client.get(f"{settings.valhalla_url}/status")
        return resp.status_code == 200
    except httpx.HTTPError:
        logger.warning("Valhalla status check failed", exc_info=True)
        return False
