"""Enumerations for the Tomcat manager module."""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    PROTOCOL = "protocol"


class WebappStatus(str, Enum):
    """Lifecycle state of a webapp as reported by the ``list`` command."""

    RUNNING = "running"
    STOPPED = "stopped"
    NOT_FOUND = "notFound"

    @classmethod
    def from_token(cls, token: str) -> "WebappStatus":
        # NOT_FOUND is a client-side sentinel, the server never reports it.
        if token == cls.RUNNING.value:
            return cls.RUNNING
        if token == cls.STOPPED.value:
            return cls.STOPPED
        raise ValueError(f"Unknown Tomcat deployable status [{token}]")
