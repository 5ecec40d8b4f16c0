"""Tomcat manager module exports."""

from .service import ManagerService
from .controller import router as manager_router

__all__ = ["ManagerService", "manager_router"]
