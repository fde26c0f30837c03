from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    valhalla_url: str = "http://localhost:8002"
    valhalla_timeout: float = 10.0
    costing: str = "auto"
    locate_radius: int | None = None
    node_snap_tolerance: int | None = None
    polyline_precision: int = 6

    map_center: tuple[float, float] = (8.0, 47.0)  # (lon, lat)
    map_zoom: int = 11

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "ROADPICK_"}


settings = Settings()
