"""Client for the Tomcat Manager text interface."""

from tomcatmgr.modules.manager.client import TomcatManager
from tomcatmgr.modules.manager.domain import (
    DeployRequest,
    EndpointConfig,
    FailureKind,
    ManagerError,
    ManagerResponse,
    WebappStatus,
)

__all__ = [
    "DeployRequest",
    "EndpointConfig",
    "FailureKind",
    "ManagerError",
    "ManagerResponse",
    "TomcatManager",
    "WebappStatus",
]
