# File: domain/errors.py
from typing import List, Optional


class SupplementationError(Exception):
    """Base class for failures raised while enriching a word."""


class SourceUnavailable(SupplementationError):
    """
    One external source failed (timeout, network error, unparsable response).
    Recovered by the orchestrator; never surfaced to the caller.
    """

    def __init__(self, source_name: str, reason: str, cause: Optional[BaseException] = None):
        self.source_name = source_name
        self.reason = reason
        self.cause = cause
        super().__init__(f"[{source_name}] {reason}")


class ValidationFailure(SupplementationError):
    """The word violates a domain invariant after merging. Nothing is written back."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "word is invalid")


class PersistenceFailure(SupplementationError):
    """Reading from or writing to the enrichment cache failed."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        message = f"Enrichment cache {operation} failed"
        if cause is not None:
            message += f": {type(cause).__name__}: {cause}"
        super().__init__(message)
