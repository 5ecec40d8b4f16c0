"""Failures raised by the Tomcat manager client."""

from __future__ import annotations

from .enums import FailureKind


class ManagerError(Exception):
    """A failure reported by, or on the way to, the Tomcat manager.

    ``message`` carries the server text verbatim for protocol failures and a
    fixed human readable message for authentication/authorization failures.
    """

    def __init__(self, kind: FailureKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value!r}, message={self.message!r})"
