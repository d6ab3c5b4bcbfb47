from __future__ import annotations

import logging
import time
import uuid
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_422_UNPROCESSABLE_ENTITY, HTTP_500_INTERNAL_SERVER_ERROR

from .. import __version__
from ..config import Settings, load_settings
from ..context import AppContext, build_context
from ..errors import FieldWidthsError
from .http_logging import install_http_logging
from .routes.admin import router as admin_router
from .routes.forms import router as forms_router
from .routes.health import router as health_router
from .routes.render import router as render_router
from .routes.widths import router as widths_router

logger = logging.getLogger(__name__)


def _repo_root() -> Path:
    # src/forminator_field_widths/api/main.py -> repo root
    return Path(__file__).resolve().parents[3]


def _request_id(prefix: str) -> str:
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


def create_app(settings: Optional[Settings] = None, ctx: Optional[AppContext] = None) -> FastAPI:
    if ctx is None:
        settings = settings or load_settings(_repo_root())
        ctx = build_context(settings)

    app = FastAPI(title="forminator-field-widths", version=__version__)
    app.state.ctx = ctx
    install_http_logging(app, ctx.settings)

    @app.exception_handler(FieldWidthsError)
    async def _field_widths_error_handler(request: Request, exc: FieldWidthsError) -> JSONResponse:
        logger.info("[api] %s %s path=%s", exc.status_code, exc.code, request.url.path)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        request_id = _request_id("val")
        # Keep server logs useful without dumping full bodies.
        logger.info("[api] 422 validation_error requestId=%s path=%s errors=%s", request_id, request.url.path, exc.errors())
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "ok": False,
                "error": "validation_error",
                "message": "Request body did not match expected schema.",
                "requestId": request_id,
            },
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = _request_id("err")
        logger.exception("[api] 500 internal_error requestId=%s path=%s", request_id, request.url.path)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "ok": False,
                "error": "internal_error",
                "message": "Unhandled server error.",
                "requestId": request_id,
            },
        )

    api_v1_prefix = "/v1"
    # Unversioned health is convenient for deployments and uptime checks.
    app.include_router(health_router)
    app.include_router(forms_router, prefix=api_v1_prefix)
    app.include_router(widths_router, prefix=api_v1_prefix)
    app.include_router(admin_router, prefix=api_v1_prefix)
    app.include_router(render_router, prefix=api_v1_prefix)
    return app
