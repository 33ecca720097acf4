"""Exception hierarchy for the oracle sync pipeline.

Fatal errors (config, fetch, table, price submission) abort the invocation and
become a failure response. FxError and AuditError are raised only inside their
own phases and are converted to phase outcomes there.
"""


class SyncError(Exception):
    """Base class for all pipeline errors."""


class ConfigError(SyncError):
    """Required configuration is missing or malformed."""


class FetchError(SyncError):
    """The listings page could not be fetched (network, timeout, non-2xx)."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class TableNotFoundError(SyncError):
    """No table on the listings page matched the header heuristic."""


class ValidationError(SyncError):
    """A listing row could not be turned into a publishable record.

    Non-fatal: the row is dropped and the invocation continues.
    """


class SubmissionError(SyncError):
    """An oracle write failed, reverted, or timed out waiting for its receipt."""

    def __init__(self, message: str, *, tx_hash: str | None = None) -> None:
        super().__init__(message)
        self.tx_hash = tx_hash


class FxError(SyncError):
    """The FX side-channel could not publish its rate."""


class AuditError(SyncError):
    """The freshness read-back could not complete."""
