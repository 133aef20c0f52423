"""Normalized error hierarchy for nomie_store."""

from __future__ import annotations

from typing import Optional


class NomieStoreError(Exception):
    """Base class for all nomie_store errors.

    :param message: Human-readable error description.
    :param path: The storage path involved in the error, if any.
    :param backend: The endpoint or engine involved, if any.
    :param status_code: HTTP status returned by the server, if any.
    """

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[str] = None,
        backend: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.path = path
        self.backend = backend
        self.status_code = status_code
        super().__init__(message)

    @property
    def message(self) -> str:
        return super().__str__()

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.path is not None:
            parts.append(f"path={self.path!r}")
        if self.backend is not None:
            parts.append(f"backend={self.backend!r}")
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        return " | ".join(parts) if len(parts) > 1 else parts[0]

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(super().__str__())]
        if self.path is not None:
            args.append(f"path={self.path!r}")
        if self.backend is not None:
            args.append(f"backend={self.backend!r}")
        if self.status_code is not None:
            args.append(f"status_code={self.status_code!r}")
        return f"{cls}({', '.join(args)})"


class ConfigurationError(NomieStoreError):
    """Raised when the endpoint URL or token is missing."""


class AuthenticationError(NomieStoreError):
    """Raised when the server rejects the configured token."""


class UnreachableError(NomieStoreError):
    """Raised when the server cannot be reached or fails validation."""


class OperationError(NomieStoreError):
    """Raised when the server answers a write with a non-success status."""
