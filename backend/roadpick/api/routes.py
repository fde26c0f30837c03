import logging

from fastapi import APIRouter, Depends, HTTPException

from roadpick.config import settings
from roadpick.layers import CLICKED_LOCATION, NODES, SEGMENTS
from roadpick.palette import CLICK_STYLE, NODE_STYLE, PALETTE, WIDTHS, edge_style, node_style
from roadpick.schemas.locate import ClickRequest
from roadpick.services import valhalla_client
from roadpick.services.click_pipeline import ClickQueryPipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1")

_pipeline = ClickQueryPipeline()


def get_pipeline() -> ClickQueryPipeline:
    return _pipeline


def _layers_geojson(pipeline: ClickQueryPipeline) -> dict:
    return {
        CLICKED_LOCATION: pipeline.clicked_location.to_geojson(),
        NODES: pipeline.nodes.to_geojson(node_style),
        SEGMENTS: pipeline.segments.to_geojson(edge_style),
    }


@router.get("/view")
async def view():
    lon, lat = settings.map_center
    return {
        "center": [lon, lat],
        "zoom": settings.map_zoom,
        "palette": [list(rgb) for rgb in PALETTE],
        "widths": WIDTHS,
        "styles": {CLICKED_LOCATION: CLICK_STYLE, NODES: NODE_STYLE},
    }


@router.post("/click")
async def click(req: ClickRequest, pipeline: ClickQueryPipeline = Depends(get_pipeline)):
    try:
        outcome = await pipeline.on_click((req.lon, req.lat))
    except Exception as e:
        logger.exception("Click handling failed")
        raise HTTPException(status_code=500, detail=str(e))

    if outcome.status == "error":
        raise HTTPException(status_code=502, detail=outcome.error)

    return {"outcome": outcome.model_dump(), "layers": _layers_geojson(pipeline)}


@router.get("/layers")
async def layers(pipeline: ClickQueryPipeline = Depends(get_pipeline)):
    return _layers_geojson(pipeline)


@router.get("/status")
async def status():
    return {"valhalla": await valhalla_client.check_status()}
