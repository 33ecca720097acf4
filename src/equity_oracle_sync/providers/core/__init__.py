"""Core provider abstractions, errors, and numeric helpers."""
from equity_oracle_sync.providers.core.exceptions import (AuditError,
                                                          ConfigError,
                                                          FetchError, FxError,
                                                          SubmissionError,
                                                          SyncError,
                                                          TableNotFoundError,
                                                          ValidationError)
from equity_oracle_sync.providers.core.utils import (parse_percent, to_fixed,
                                                     to_number)

__all__ = [
    "AuditError",
    "ConfigError",
    "FetchError",
    "FxError",
    "SubmissionError",
    "SyncError",
    "TableNotFoundError",
    "ValidationError",
    "parse_percent",
    "to_fixed",
    "to_number",
]
