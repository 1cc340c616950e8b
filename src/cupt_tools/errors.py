from __future__ import annotations


class CuptError(RuntimeError):
    """Base class for errors raised while handling Cupt data."""


class FormatError(CuptError):
    """Raised when a line or field of a Cupt file is malformed."""


class ConsistencyError(CuptError):
    """Raised when tokens of a sentence (or aligned documents) disagree."""
