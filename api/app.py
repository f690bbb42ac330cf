from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from api.dependencies import ApiConfig, ClientError, get_config, get_parser
from api.routes.outlines import router as outlines_router
from api.routes.progress import router as progress_router

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        force=True,
    )


def create_app(config: Optional[ApiConfig] = None) -> FastAPI:
    config = config or get_config()

    app = FastAPI(title="Study Tracker API", version="0.1.0")
    app.state.config = config
    app.state.parser = get_parser(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(ClientError)
    async def _client_error_handler(request: Request, exc: ClientError):
        return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        # A text field sent where the upload belongs fails validation on "homeworkFile".
        if any("homeworkFile" in err.get("loc", ()) for err in exc.errors()):
            message = "No file was uploaded"
        else:
            message = "Invalid request data"
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"success": False, "error": message})

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})

    app.include_router(outlines_router)
    app.include_router(progress_router)

    @app.get("/healthz")
    def health() -> dict:
        return {"status": "ok"}

    # Mounted last so API routes take precedence over static paths.
    if config.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")
    else:
        logger.info("Static directory %s not found, front-end not served", config.static_dir)

    return app
