"""Main FastAPI server for the transcription relay."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware

from src.state.settings import AppSettings
from src.handlers.http.routes import router
from src.runtime.settings import load_settings
from src.runtime.logging import configure_logging
from src.runtime.dependencies import build_runtime_deps
from src.handlers.websocket.manager import handle_websocket_connection

logger = logging.getLogger(__name__)

configure_logging()


def create_app(settings: AppSettings | None = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.runtime_deps = build_runtime_deps(settings)
        logger.info("runtime: ready")
        try:
            yield
        finally:
            deps = getattr(app.state, "runtime_deps", None)
            if deps is not None:
                await deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)

    origins = list(settings.server.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(router)

    @app.websocket(settings.websocket.endpoint_path)
    async def websocket_endpoint(websocket: WebSocket) -> None:
        runtime_deps = getattr(app.state, "runtime_deps", None)
        if runtime_deps is None:
            raise RuntimeError("Runtime dependencies are not initialized")
        await handle_websocket_connection(websocket, runtime_deps)

    return app


app = create_app()


def main() -> None:
    settings = load_settings()
    logger.info("Listening on %s:%s", settings.server.host, settings.server.port)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_config=None)


if __name__ == "__main__":
    main()
