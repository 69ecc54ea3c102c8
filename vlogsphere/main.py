import logging

from fastapi import FastAPI

from vlogsphere.config import settings
from vlogsphere.db.db import lifespan
from vlogsphere.routers.router import router as vlog_router
from vlogsphere.routers.automations.tagging.analysis import router as analysis_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.include_router(vlog_router)
app.include_router(analysis_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
