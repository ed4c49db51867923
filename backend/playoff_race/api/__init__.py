"""
API module.
"""

from .routes import analyses_router, teams_router
from .tasks import TaskStore, task_store

__all__ = [
    "analyses_router",
    "teams_router",
    "TaskStore",
    "task_store",
]
