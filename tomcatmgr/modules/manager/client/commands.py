"""Builds the relative command paths understood by ``/manager/text``."""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import quote_plus

from tomcatmgr.modules.manager.domain import DeployRequest, FailureKind, ManagerError
from tomcatmgr.modules.manager.domain.models import check_charset


class CommandBuilder:
    """Assemble command paths with values encoded in the query charset."""

    def __init__(self, charset: str) -> None:
        self.charset = check_charset(charset)

    def encode(self, value: str) -> str:
        try:
            return quote_plus(value, safe="", encoding=self.charset)
        except UnicodeEncodeError as exc:
            raise ManagerError(
                FailureKind.CONFIGURATION,
                f"Cannot encode [{value}] using charset [{self.charset}]",
            ) from exc

    def deploy(self, request: DeployRequest) -> str:
        params: List[str] = [f"path={self.encode(request.path)}"]
        if request.config is not None:
            params.append(f"config={self.encode(request.config)}")
        # A streamed archive travels in the body and has no URL to send.
        if request.war_url is not None:
            params.append(f"war={self.encode(request.war_url)}")
        if request.update:
            params.append("update=true")
        if request.tag is not None:
            params.append(f"tag={self.encode(request.tag)}")
        return "/deploy?" + "&".join(params)

    def undeploy(self, path: str) -> str:
        return self._with_path("undeploy", path)

    def remove(self, path: str) -> str:
        return self._with_path("remove", path)

    def reload(self, path: str) -> str:
        return self._with_path("reload", path)

    def start(self, path: str) -> str:
        return self._with_path("start", path)

    def stop(self, path: str) -> str:
        return self._with_path("stop", path)

    def list(self) -> str:
        return "/list"

    def _with_path(self, command: str, path: Optional[str]) -> str:
        return f"/{command}?path={self.encode(path or '')}"
