from .constants import (
    AUTHENTICATION_FAILED_MESSAGE,
    AUTHORIZATION_FAILED_MESSAGE,
    DEFAULT_CHUNK_SIZE,
    MANAGER_CHARSET,
    OK_PREFIX,
)
from .enums import FailureKind, WebappStatus
from .errors import ManagerError
from .models import ArchiveRef, DeployRequest, EndpointConfig, ManagerResponse, UrlRef

__all__ = [
    "AUTHENTICATION_FAILED_MESSAGE",
    "AUTHORIZATION_FAILED_MESSAGE",
    "DEFAULT_CHUNK_SIZE",
    "MANAGER_CHARSET",
    "OK_PREFIX",
    "ArchiveRef",
    "DeployRequest",
    "EndpointConfig",
    "FailureKind",
    "ManagerError",
    "ManagerResponse",
    "UrlRef",
    "WebappStatus",
]
