"""API routers."""

from .control import create_control_router
from .observability import create_observability_router
from .runs import create_runs_router
from .timeline import create_timeline_router

__all__ = [
    "create_control_router",
    "create_observability_router",
    "create_runs_router",
    "create_timeline_router",
]
