#!/usr/bin/env python3
"""
Exceptions raised by the matching service layer.

Each class carries the HTTP-equivalent status code a transport layer
should map it onto.
"""


class MatchingError(Exception):
    """Base exception for matching service errors."""
    status_code = 500


class ValidationError(MatchingError):
    """Raised when a request (ids, limit, rating, status) is malformed."""
    status_code = 400

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.details = details or []


class GigNotFoundError(MatchingError):
    """Raised when a gig id does not resolve."""
    status_code = 404


class MatchNotFoundError(MatchingError):
    """Raised when a match id does not resolve."""
    status_code = 404


class ProviderUnavailableError(MatchingError):
    """Raised when the embedding provider cannot produce a vector."""
    status_code = 503


class PersistenceError(MatchingError):
    """Raised when replacing the stored match set fails; nothing is committed."""
    status_code = 500
