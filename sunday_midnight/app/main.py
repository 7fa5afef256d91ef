from __future__ import annotations

from fastapi import FastAPI

from sunday_midnight.app.routers.countdown import router as countdown_router
from sunday_midnight.version import get_version


def create_app() -> FastAPI:
    app = FastAPI(title="Sunday Midnight Countdown")
    app.state.version = get_version()

    @app.get("/health")
    def health():
        return {"status": "ok", "version": app.state.version}

    app.include_router(countdown_router)
    return app


app = create_app()
