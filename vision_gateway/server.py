"""Gateway HTTP surface — one FastAPI route from upload to normalized analysis."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from vision_gateway.annotations import ANALYSIS_FEATURES
from vision_gateway.config import Config
from vision_gateway.constants import (
    ANALYZE_PATH,
    APP_TITLE,
    ERR_ANALYSIS_FAILED,
    ERR_NO_IMAGE,
    IMAGE_FIELD,
    MSG_ANALYSIS_DONE,
    MSG_ANALYSIS_ERROR,
    MSG_PROCESSING,
)
from vision_gateway.normalizer import normalize
from vision_gateway.vision.client import VisionClient

logger = logging.getLogger(__name__)


async def _read_image(request: Request) -> bytes:
    """Bytes of the uploaded image field; a missing field or a plain text value reads as empty."""
    form = await request.form()
    match form.get(IMAGE_FIELD):
        case UploadFile() as upload:
            return await upload.read()
        case _:
            return b""


def create_app(config: Config, vision_client: VisionClient) -> FastAPI:
    """Build the gateway app. Config and client are read-only and shared by every request."""
    app = FastAPI(title=APP_TITLE)

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(config.cors_origins),
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.on_event("shutdown")
    async def _close_vision_client() -> None:
        await vision_client.close()

    @app.post(ANALYZE_PATH)
    async def analyze(request: Request) -> JSONResponse:
        image_bytes = await _read_image(request)
        if not image_bytes:
            return JSONResponse(status_code=400, content={"error": ERR_NO_IMAGE})

        logger.info(MSG_PROCESSING)
        try:
            native = await vision_client.analyze(image_bytes, ANALYSIS_FEATURES)
        except Exception as exc:
            logger.exception(MSG_ANALYSIS_ERROR, exc)
            return JSONResponse(
                status_code=500,
                content={"error": ERR_ANALYSIS_FAILED, "details": str(exc)},
            )

        result = normalize(native)
        logger.debug(
            MSG_ANALYSIS_DONE, len(result.labels), len(result.text), result.safety is not None
        )
        return JSONResponse(content={"success": True, "data": result.to_dict()})

    return app
