"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from gql_import.web.api import router


def create_app() -> FastAPI:
    app = FastAPI(title="gql-import", version="0.1.0")
    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
