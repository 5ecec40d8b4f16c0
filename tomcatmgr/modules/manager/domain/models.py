"""Dataclasses describing the manager endpoint, requests and responses."""

from __future__ import annotations

import codecs
import io
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Optional, Tuple, Union

from .constants import DEFAULT_CHARSET, DEFAULT_USERNAME
from .enums import FailureKind
from .errors import ManagerError

if TYPE_CHECKING:  # pragma: no cover
    from tomcatmgr.settings import Settings

UrlRef = Union[str, "os.PathLike[str]"]
ArchiveRef = Union[UrlRef, bytes, BinaryIO]


def check_charset(charset: str) -> str:
    """Return the charset unchanged, or fail if it is not a usable text encoding."""
    try:
        codecs.lookup(charset)
        "x".encode(charset)
    except LookupError as exc:
        raise ManagerError(FailureKind.CONFIGURATION, f"Unsupported charset [{charset}]") from exc
    return charset


def as_url(ref: UrlRef) -> str:
    """Render a descriptor/archive reference as the URL Tomcat will fetch."""
    if isinstance(ref, os.PathLike):
        return Path(ref).absolute().as_uri()
    return str(ref)


def split_archive(war: ArchiveRef) -> Tuple[Optional[str], Optional[BinaryIO]]:
    """Tell a referenced archive (URL or path) from a streamed one."""
    if isinstance(war, (bytes, bytearray)):
        return None, io.BytesIO(war)
    if hasattr(war, "read"):
        return None, war  # type: ignore[return-value]
    if isinstance(war, (str, os.PathLike)):
        return as_url(war), None
    raise TypeError(f"Unsupported archive source {type(war).__name__}")


@dataclass(frozen=True)
class EndpointConfig:
    """Where the manager lives and how to talk to it."""

    url: str
    username: Optional[str] = DEFAULT_USERNAME
    password: Optional[str] = ""
    charset: str = DEFAULT_CHARSET
    user_agent: Optional[str] = None

    def __post_init__(self) -> None:
        check_charset(self.charset)
        object.__setattr__(self, "url", self.url.rstrip("/"))

    @classmethod
    def from_settings(cls, settings: "Settings") -> "EndpointConfig":
        return cls(
            url=settings.manager_url,
            username=settings.manager_username,
            password=settings.manager_password,
            charset=settings.manager_charset,
            user_agent=settings.manager_user_agent,
        )


@dataclass(frozen=True)
class DeployRequest:
    """One deployment, in any of its shapes.

    ``config`` is the context descriptor URL. The archive is either
    ``war_url`` (fetched by Tomcat) or ``war_stream`` (uploaded as the
    request body); never both.
    """

    path: str
    config: Optional[str] = None
    war_url: Optional[str] = None
    war_stream: Optional[BinaryIO] = None
    update: bool = False
    tag: Optional[str] = None

    def __post_init__(self) -> None:
        if self.war_url is not None and self.war_stream is not None:
            raise ValueError("An archive is either referenced by URL or streamed, not both")

    @classmethod
    def for_archive(
        cls,
        path: str,
        war: ArchiveRef,
        *,
        update: bool = False,
        tag: Optional[str] = None,
    ) -> "DeployRequest":
        war_url, war_stream = split_archive(war)
        return cls(path=path, war_url=war_url, war_stream=war_stream, update=update, tag=tag)

    @classmethod
    def for_context(
        cls,
        path: str,
        config: UrlRef,
        war: Optional[ArchiveRef] = None,
        *,
        update: bool = False,
        tag: Optional[str] = None,
    ) -> "DeployRequest":
        war_url, war_stream = split_archive(war) if war is not None else (None, None)
        return cls(
            path=path,
            config=as_url(config),
            war_url=war_url,
            war_stream=war_stream,
            update=update,
            tag=tag,
        )


@dataclass(frozen=True)
class ManagerResponse:
    """A successful manager answer.

    ``body`` is the raw text, ``message`` its first line without ``OK - ``.
    """

    body: str
    message: str
