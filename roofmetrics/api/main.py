"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roofmetrics.api.routes import router


# CRM web client (Vite dev server and the bundled server)
DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
]


def create_app(cors_origins: list[str] | None = None) -> FastAPI:
    app = FastAPI(
        title="Roof Metrics Engine",
        description="Roof edge classification, material estimation and ordering",
        version="0.2.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins if cors_origins is not None else DEFAULT_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
