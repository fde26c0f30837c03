import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roadpick.api.routes import router
from roadpick.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="roadpick")

# The map page is served separately and calls this API from the browser
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(router)
