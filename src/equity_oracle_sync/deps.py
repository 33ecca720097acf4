"""FastAPI dependency injection: app.state holds singletons; Depends() resolves them.

Lifespan (main.py) attaches the sync runner and the invocation lock once at
startup; these getters are used by Depends().
"""
import asyncio
from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Request

from equity_oracle_sync.schemas import SyncResponse

SyncRunner = Callable[[], Awaitable[SyncResponse]]


def get_sync_runner(request: Request) -> SyncRunner:
    """Resolve the one-shot sync runner from app.state."""
    return request.app.state.sync_runner


def get_sync_lock(request: Request) -> asyncio.Lock:
    """Resolve the lock that keeps invocations under one signer from overlapping."""
    return request.app.state.sync_lock


# Type aliases for route injection
SyncRunnerDep = Annotated[SyncRunner, Depends(get_sync_runner)]
SyncLockDep = Annotated[asyncio.Lock, Depends(get_sync_lock)]
