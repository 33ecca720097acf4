"""Trigger route for the oracle sync job.

Schedulers (cron, Vercel/Cloud Scheduler style pings) call GET /api/run.
The handler only serializes invocations and returns the service's response.
"""
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from equity_oracle_sync.deps import SyncLockDep, SyncRunnerDep

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["sync"])


@router.get("/run")
async def run_sync(runner: SyncRunnerDep, lock: SyncLockDep) -> JSONResponse:
    """Run one sync invocation.

    Returns:
        200 with counts and transaction hashes on success, or an error status
        with ``{"success": false, "error": ...}`` when the equity path failed.
    """
    if lock.locked():
        logger.info("Previous sync still running; waiting for it to finish")
    async with lock:
        result = await runner()
    return JSONResponse(content=result.to_json(), status_code=result.status_code)
