"""Wiring of the services used by the API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tomcatmgr.modules.manager import ManagerService

from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    manager_service: ManagerService = field(init=False)

    def __post_init__(self) -> None:
        self.manager_service = ManagerService(self.settings)
        log.info(
            "Tomcat manager endpoint %s user=%s charset=%s",
            self.settings.manager_url,
            self.settings.manager_username or "-",
            self.settings.manager_charset,
        )

    def close(self) -> None:
        self.manager_service.close()
