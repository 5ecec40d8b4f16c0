"""Service wrapping :class:`TomcatManager` calls into operation results."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import httpx

from tomcatmgr.modules.manager.client import TomcatManager
from tomcatmgr.modules.manager.domain import (
    ArchiveRef,
    EndpointConfig,
    FailureKind,
    ManagerError,
    ManagerResponse,
)
from tomcatmgr.settings import Settings

log = logging.getLogger(__name__)


@dataclass
class OperationResult:
    ok: bool
    message: str
    data: Any = None
    kind: Optional[FailureKind] = None

    def as_dict(self) -> Dict[str, Any]:
        payload = {"status": "true" if self.ok else "false", "msg": self.message}
        if self.kind is not None:
            payload["kind"] = self.kind.value
        if self.data is not None:
            payload["data"] = self.data
        return payload


class ManagerService:
    """Runs manager commands and reports every outcome as an OperationResult."""

    def __init__(self, settings: Settings, manager: Optional[TomcatManager] = None) -> None:
        self.settings = settings
        self.manager = manager or TomcatManager(
            EndpointConfig.from_settings(settings),
            timeout=settings.manager_timeout,
        )

    def deploy(
        self,
        *,
        path: str,
        war: Optional[ArchiveRef] = None,
        config: Optional[str] = None,
        update: bool = False,
        tag: Optional[str] = None,
    ) -> OperationResult:
        if config is not None:
            return self._run(
                "deploy",
                path,
                lambda: self.manager.deploy_context(path, config, war, update=update, tag=tag),
            )
        if war is None:
            return OperationResult(False, "war or config is required")
        return self._run(
            "deploy",
            path,
            lambda: self.manager.deploy(path, war, update=update, tag=tag),
        )

    def undeploy(self, *, path: str) -> OperationResult:
        return self._run("undeploy", path, lambda: self.manager.undeploy(path))

    def remove(self, *, path: str) -> OperationResult:
        return self._run("remove", path, lambda: self.manager.remove(path))

    def reload(self, *, path: str) -> OperationResult:
        return self._run("reload", path, lambda: self.manager.reload(path))

    def start(self, *, path: str) -> OperationResult:
        return self._run("start", path, lambda: self.manager.start(path))

    def stop(self, *, path: str) -> OperationResult:
        return self._run("stop", path, lambda: self.manager.stop(path))

    def list(self) -> OperationResult:
        def _list() -> OperationResult:
            body = self.manager.list()
            return OperationResult(True, "ok", {"listing": body})

        return self._guard("list", None, _list)

    def get_status(self, *, path: str) -> OperationResult:
        def _status() -> OperationResult:
            status = self.manager.get_status(path)
            return OperationResult(True, "ok", {"path": path, "status": status.value})

        return self._guard("status", path, _status)

    def close(self) -> None:
        self.manager.close()

    def _run(
        self,
        operation: str,
        path: str,
        call: Callable[[], ManagerResponse],
    ) -> OperationResult:
        def _call() -> OperationResult:
            response = call()
            log.info("Tomcat %s succeeded path=%s: %s", operation, path, response.message)
            return OperationResult(True, response.message)

        return self._guard(operation, path, _call)

    def _guard(
        self,
        operation: str,
        path: Optional[str],
        call: Callable[[], OperationResult],
    ) -> OperationResult:
        try:
            return call()
        except ManagerError as exc:
            log.warning(
                "Tomcat %s failed path=%s kind=%s: %s",
                operation,
                path or "-",
                exc.kind.value,
                exc.message,
            )
            return OperationResult(False, exc.message, kind=exc.kind)
        except httpx.HTTPError as exc:
            log.error("Tomcat %s transport error path=%s: %s", operation, path or "-", exc)
            return OperationResult(False, str(exc), kind=FailureKind.TRANSPORT)
