"""API routers.

Includes routes for:
- /api/run - trigger one oracle sync invocation
"""
from equity_oracle_sync.routers.sync import router as sync_router

__all__ = ["sync_router"]
