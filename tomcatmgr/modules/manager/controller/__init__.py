"""Controller exports."""

from .router import router

__all__ = ["router"]
