# grammaticus/core/domain/exceptions.py
"""
Domain exceptions.

Only the ingestion boundary raises these (building a store from a compiled
bundle). Rendering never raises: missing data degrades to empty strings or
to the MISSING sentinel.
"""


class GrammaticusError(Exception):
    """Base exception for label bundle problems."""


class InvalidTermError(GrammaticusError):
    """Raised when a term reference or grammatical part cannot be ingested."""

    def __init__(self, message: str, raw=None):
        super().__init__(message)
        self.raw = raw


class InvalidBundleError(GrammaticusError):
    """Raised when a compiled bundle does not have the expected top-level shape."""
