from .auth import to_authorization
from .commands import CommandBuilder
from .manager import TomcatManager
from .parser import find_status, parse_response
from .transport import ManagerTransport

__all__ = [
    "CommandBuilder",
    "ManagerTransport",
    "TomcatManager",
    "find_status",
    "parse_response",
    "to_authorization",
]
