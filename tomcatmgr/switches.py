"""Feature toggle helpers."""

from __future__ import annotations

from dataclasses import dataclass

from .settings import Settings


@dataclass
class ManagerSwitch:
    settings: Settings

    def deploy_on(self) -> bool:
        return bool(self.settings.switch_deploy)
