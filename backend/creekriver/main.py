import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from creekriver.api.routers import campsites, reservations
from creekriver.config import get_settings
from creekriver.db import init_db
from creekriver.services.errors import INVALID_DATA_MESSAGE

logger = logging.getLogger(__name__)


# 初回起動時にDBスキーマを作成し、初期データを投入
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(seed=get_settings().seed_on_startup)
    yield


async def plain_http_exception_handler(request: Request, exc: StarletteHTTPException):
    # エラー本文は JSON ではなくプレーンテキスト
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None)
    )


async def invalid_request_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return PlainTextResponse(INVALID_DATA_MESSAGE, status_code=400)


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(message)s",
    )

    app = FastAPI(title="Creek River Campground API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, plain_http_exception_handler)
    app.add_exception_handler(RequestValidationError, invalid_request_handler)

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(campsites.router,    prefix=f"{settings.api_prefix}/campsites",    tags=["campsites"])
    app.include_router(reservations.router, prefix=f"{settings.api_prefix}/reservations", tags=["reservations"])
    return app


app = create_app()
