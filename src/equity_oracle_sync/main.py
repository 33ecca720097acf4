"""Main module for the oracle sync service."""
import asyncio
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from equity_oracle_sync.routers import sync_router
from equity_oracle_sync.services.sync_factory import run_once

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Attach the sync runner and invocation lock at startup.

    Settings are not read here: each invocation reads them once at its start.
    """
    fastapi_app.state.sync_runner = run_once
    fastapi_app.state.sync_lock = asyncio.Lock()
    yield


app = FastAPI(
    title="Equity Oracle Sync",
    description="Publishes NGX equity mark prices and price bands to an on-chain oracle",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(sync_router)


@app.get("/")
def health():
    """Return health check status."""
    return {"status": "ok"}


def configure_logging() -> None:
    """Basic logging config; level from LOG_LEVEL (default INFO)."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run():
    """Run the server (uvicorn). Use for `poetry run start`."""
    configure_logging()
    uvicorn.run(
        "equity_oracle_sync.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8001")),
    )
