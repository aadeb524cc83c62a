from __future__ import annotations


class SuperQiError(Exception):
    """Base error for SuperQi provider failures."""


class SigningError(SuperQiError):
    """Signing key is missing, malformed or cannot sign."""


class TransportError(SuperQiError):
    """Provider request failed on the network or returned a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportTimeoutError(TransportError):
    """Provider request exceeded the configured timeout."""


class DecodeError(SuperQiError):
    """Provider returned a body that is not the expected JSON."""
