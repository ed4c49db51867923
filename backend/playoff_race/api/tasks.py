"""
In-memory tracking of background analysis tasks.

Tasks only live as long as the process.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional
from uuid import uuid4


@dataclass
class AnalysisTask:
    """Background analysis task tracking."""

    id: str
    team: str
    status: str = "pending"
    progress: int = 0
    error_message: Optional[str] = None
    results: Optional[dict] = None
    markdown: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None


class TaskStore:
    """Store for analysis task operations."""

    def __init__(self):
        self._tasks: Dict[str, AnalysisTask] = {}

    def create(self, team: str) -> AnalysisTask:
        """Create a new analysis task."""
        task = AnalysisTask(id=str(uuid4()), team=team.upper())
        self._tasks[task.id] = task
        return task

    def get_by_id(self, task_id: str) -> Optional[AnalysisTask]:
        """Get a task by ID."""
        return self._tasks.get(task_id)

    def update_progress(self, task: AnalysisTask, progress: int) -> None:
        """Update task progress."""
        task.progress = progress
        task.status = "running"

    def complete(self, task: AnalysisTask, results: dict, markdown: str) -> None:
        """Mark task as completed with results."""
        task.status = "completed"
        task.progress = 100
        task.results = results
        task.markdown = markdown
        task.completed_at = datetime.now(timezone.utc)

    def fail(self, task: AnalysisTask, error_message: str) -> None:
        """Mark task as failed with error message."""
        task.status = "failed"
        task.error_message = error_message
        task.completed_at = datetime.now(timezone.utc)

    def cleanup_old_tasks(self, hours: int = 24) -> int:
        """
        Remove tasks older than specified hours.

        Returns:
            Number of tasks deleted
        """
        cutoff = datetime.now(timezone.utc) - timedelta(hours=hours)
        old_ids = [tid for tid, task in self._tasks.items() if task.created_at < cutoff]
        for tid in old_ids:
            del self._tasks[tid]
        return len(old_ids)


task_store = TaskStore()
