from __future__ import annotations

import logging

from cloudinary.exceptions import Error as CloudinaryError
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.handlers import media_handler

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Tienda Media API")

app.include_router(media_handler.router)


@app.exception_handler(CloudinaryError)
async def cloudinary_error_handler(request: Request, exc: CloudinaryError):
    logger.error("Media store error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
