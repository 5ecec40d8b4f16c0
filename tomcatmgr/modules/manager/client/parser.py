"""Interpretation of the manager's plain text answers."""

from __future__ import annotations

from tomcatmgr.modules.manager.domain import (
    OK_PREFIX,
    FailureKind,
    ManagerError,
    ManagerResponse,
    WebappStatus,
)


def parse_response(body: str) -> ManagerResponse:
    """Accept an ``OK - ...`` body or raise a protocol failure carrying it."""
    if not body.startswith(OK_PREFIX):
        raise ManagerError(FailureKind.PROTOCOL, body)
    first_line = body.splitlines()[0]
    return ManagerResponse(body=body, message=first_line[len(OK_PREFIX):].rstrip())


def find_status(listing: str, path: str) -> WebappStatus:
    """Look ``path`` up in a ``list`` answer.

    Records are ``path:status:sessions:docbase``. The field following the
    first field equal to ``path`` is the status token; first match wins.
    """
    for record in listing.split("\n"):
        words = [word for word in record.rstrip("\r").split(":") if word]
        for index, word in enumerate(words):
            if word != path:
                continue
            if index + 1 >= len(words):
                raise ValueError(f"Listing record [{record}] has no status after [{path}]")
            return WebappStatus.from_token(words[index + 1])
    return WebappStatus.NOT_FOUND
