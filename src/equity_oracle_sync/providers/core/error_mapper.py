"""Maps pipeline exceptions to the failure response returned to the trigger."""
import asyncio
from dataclasses import dataclass

import httpx

from equity_oracle_sync.providers.core.exceptions import (ConfigError,
                                                          FetchError,
                                                          SubmissionError,
                                                          TableNotFoundError)
from equity_oracle_sync.schemas import SyncFailure


@dataclass(frozen=True)
class SyncErrorMapper:
    """Maps exceptions raised on the main price/band path to (status_code, detail).

    The detail is the exception message so the caller sees what aborted the run.
    """

    job_name: str = "Oracle sync"

    def to_http(self, exc: Exception) -> tuple[int, str]:
        """Map an exception to (status_code, detail).

        Args:
            exc: The exception that aborted the invocation.

        Returns:
            (status_code, detail) for the failure response.
        """
        detail = str(exc) or f"{self.job_name} failed: {type(exc).__name__}"
        if isinstance(exc, ConfigError):
            return (500, detail)
        if isinstance(exc, (FetchError, TableNotFoundError)):
            # Upstream listings page unavailable or changed shape
            return (502, detail)
        if isinstance(exc, (SubmissionError, httpx.HTTPStatusError)):
            return (502, detail)
        if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
            return (504, detail)
        return (500, detail)

    def to_failure(self, exc: Exception) -> SyncFailure:
        """Build the failure response for an exception."""
        status_code, detail = self.to_http(exc)
        return SyncFailure(error=detail, http_status=status_code)
