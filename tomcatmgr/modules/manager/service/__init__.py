from .manager import ManagerService, OperationResult

__all__ = ["ManagerService", "OperationResult"]
