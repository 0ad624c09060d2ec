"""Read-only FastAPI surface for auditing the strategy between ticks."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from . import config
from .diagnostics import configure_logging
from .strategy import MainStrategy


def create_app(strategy: MainStrategy) -> FastAPI:
    app = FastAPI(title="Snakehive diagnostics")

    @app.get("/api/state")
    async def strategy_status() -> dict:
        return strategy.describe()

    @app.get("/api/snakes")
    async def snake_status() -> dict:
        lines = strategy.inspect().splitlines()
        return {"count": len(lines), "snakes": lines}

    @app.get("/api/validate")
    async def validate() -> dict:
        problems = strategy.game_state.validate_snakes()
        return {"ok": not problems, "problems": problems}

    return app


def serve(app: FastAPI, host: str = config.DIAGNOSTICS_HOST, port: int = config.DIAGNOSTICS_PORT) -> None:
    configure_logging(config.LOG_LEVEL)
    uvicorn.run(app, host=host, port=port, log_level=config.LOG_LEVEL.lower())
