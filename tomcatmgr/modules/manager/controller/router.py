"""FastAPI routes exposing the Tomcat manager commands."""

from __future__ import annotations

import tempfile
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from tomcatmgr.modules.manager.service import ManagerService

router = APIRouter(prefix="/manager", tags=["tomcat-manager"])

PATH_COMMANDS = ("undeploy", "remove", "reload", "start", "stop")

# Uploads larger than this spill to disk instead of staying in memory.
SPOOL_MAX_SIZE = 1024 * 1024


def get_service(request: Request) -> ManagerService:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "manager_service", None):
        raise HTTPException(status_code=500, detail="Tomcat manager service not initialized.")
    return container.manager_service


def require_deploy_enabled(request: Request) -> None:
    switches = getattr(request.app.state, "switches", None)
    if switches and not getattr(switches, "deploy_on", lambda: True)():
        raise HTTPException(status_code=503, detail="deploy feature is disabled")


def _require_path(payload: Dict[str, Any]) -> str:
    path = payload.get("path")
    if not isinstance(path, str) or not path:
        raise HTTPException(status_code=400, detail="path is required")
    return path


def _optional_str(payload: Dict[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise HTTPException(status_code=400, detail=f"{key} must be a string")
    return value


def _flag(payload: Dict[str, Any], key: str) -> bool:
    value = payload.get(key, False)
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise HTTPException(status_code=400, detail=f"{key} must be a boolean")


@router.get("/list")
def list_webapps(svc: ManagerService = Depends(get_service)):
    return svc.list().as_dict()


@router.get("/status")
def webapp_status(path: str, svc: ManagerService = Depends(get_service)):
    return svc.get_status(path=path).as_dict()


@router.post("/deploy")
def deploy_by_reference(
    payload: Dict[str, Any],
    svc: ManagerService = Depends(get_service),
    _: None = Depends(require_deploy_enabled),
):
    path = _require_path(payload)
    war = _optional_str(payload, "war")
    config = _optional_str(payload, "config")
    tag = _optional_str(payload, "tag")
    if war is None and config is None:
        raise HTTPException(status_code=400, detail="war or config is required")
    return svc.deploy(
        path=path,
        war=war,
        config=config,
        update=_flag(payload, "update"),
        tag=tag,
    ).as_dict()


@router.put("/deploy")
async def deploy_upload(
    request: Request,
    path: str,
    config: Optional[str] = None,
    update: bool = False,
    tag: Optional[str] = None,
    svc: ManagerService = Depends(get_service),
    _: None = Depends(require_deploy_enabled),
):
    archive = tempfile.SpooledTemporaryFile(max_size=SPOOL_MAX_SIZE)
    try:
        size = 0
        async for chunk in request.stream():
            size += len(chunk)
            await run_in_threadpool(archive.write, chunk)
        if not size:
            raise HTTPException(status_code=400, detail="archive body is required")
        archive.seek(0)
        result = await run_in_threadpool(
            svc.deploy,
            path=path,
            war=archive,
            config=config,
            update=update,
            tag=tag,
        )
        return result.as_dict()
    finally:
        archive.close()


@router.post("/{command}")
def path_command(
    command: str,
    payload: Dict[str, Any],
    svc: ManagerService = Depends(get_service),
    _: None = Depends(require_deploy_enabled),
):
    if command not in PATH_COMMANDS:
        raise HTTPException(status_code=404, detail=f"Unknown manager command {command}")
    path = _require_path(payload)
    return getattr(svc, command)(path=path).as_dict()
