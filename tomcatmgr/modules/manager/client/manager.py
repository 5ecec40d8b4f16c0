"""Public client for the Tomcat Manager text interface."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from tomcatmgr.modules.manager.domain import (
    DEFAULT_CHUNK_SIZE,
    ArchiveRef,
    DeployRequest,
    EndpointConfig,
    ManagerResponse,
    UrlRef,
    WebappStatus,
)

from .commands import CommandBuilder
from .parser import find_status
from .transport import ManagerTransport


class TomcatManager:
    """Deploy, undeploy and query webapps through ``/manager/text``.

    Every call is one blocking HTTP exchange. Failures surface as
    :class:`ManagerError` (authentication, authorization, protocol,
    configuration) or as the original ``httpx.HTTPError`` for transport
    problems. Nothing is retried.
    """

    def __init__(
        self,
        endpoint: EndpointConfig,
        client: Optional[httpx.Client] = None,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        timeout: Optional[float] = None,
    ) -> None:
        self.endpoint = endpoint
        self.commands = CommandBuilder(endpoint.charset)
        self.transport = ManagerTransport(endpoint, client, chunk_size=chunk_size, timeout=timeout)
        self.log = logging.getLogger(self.__class__.__name__)

    @property
    def url(self) -> str:
        return self.endpoint.url

    @property
    def username(self) -> Optional[str]:
        return self.endpoint.username

    @property
    def password(self) -> Optional[str]:
        return self.endpoint.password

    @property
    def charset(self) -> str:
        return self.endpoint.charset

    @property
    def user_agent(self) -> Optional[str]:
        return self.endpoint.user_agent

    def deploy(
        self,
        path: str,
        war: ArchiveRef,
        update: bool = False,
        tag: Optional[str] = None,
    ) -> ManagerResponse:
        """Deploy an archive given by URL/path, or uploaded from a stream or bytes."""
        return self.deploy_request(DeployRequest.for_archive(path, war, update=update, tag=tag))

    def deploy_context(
        self,
        path: str,
        config: UrlRef,
        war: Optional[ArchiveRef] = None,
        update: bool = False,
        tag: Optional[str] = None,
    ) -> ManagerResponse:
        """Deploy a context descriptor, optionally together with an archive."""
        return self.deploy_request(
            DeployRequest.for_context(path, config, war, update=update, tag=tag)
        )

    def deploy_request(self, request: DeployRequest) -> ManagerResponse:
        command = self.commands.deploy(request)
        return self.transport.invoke(command, request.war_stream)

    def undeploy(self, path: str) -> ManagerResponse:
        return self.transport.invoke(self.commands.undeploy(path))

    def remove(self, path: str) -> ManagerResponse:
        return self.transport.invoke(self.commands.remove(path))

    def reload(self, path: str) -> ManagerResponse:
        return self.transport.invoke(self.commands.reload(path))

    def start(self, path: str) -> ManagerResponse:
        return self.transport.invoke(self.commands.start(path))

    def stop(self, path: str) -> ManagerResponse:
        return self.transport.invoke(self.commands.stop(path))

    def list(self) -> str:
        return self.transport.invoke(self.commands.list()).body

    def get_status(self, path: str) -> WebappStatus:
        status = find_status(self.list(), path)
        self.log.debug("Webapp [%s] is %s", path, status.value)
        return status

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "TomcatManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
