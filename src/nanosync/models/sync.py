"""
Models for sync execution results and status tracking.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field


class SyncStatus(str, Enum):
    """Status of a sync execution."""
    PENDING = "pending"
    VALIDATED = "validated"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class SyncExecution(BaseModel):
    """Represents a single sync execution of a process."""
    id: str
    status: SyncStatus = SyncStatus.PENDING
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None
    execution_time_seconds: Optional[float] = None
    query_results: Optional[Dict[str, Any]] = None
    results: Optional[Dict[str, Any]] = None
    error_message: Optional[str] = None
    triggered_by: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == SyncStatus.COMPLETED

    def mark_completed(self, results: Dict[str, Any]) -> None:
        """Record the mutation results and finish the execution."""
        self.results = results
        self.status = SyncStatus.COMPLETED
        self._finish()

    def mark_failed(self, error_message: str) -> None:
        """Record the failure and finish the execution."""
        self.error_message = error_message
        self.status = SyncStatus.FAILED
        self._finish()

    def _finish(self) -> None:
        self.completed_at = datetime.now(timezone.utc)
        self.execution_time_seconds = (self.completed_at - self.started_at).total_seconds()

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the execution."""
        return {
            "id": self.id,
            "status": self.status,
            "started_at": self.started_at,
            "completed_at": self.completed_at,
            "fields_synced": len(self.results or {}),
            "error_message": self.error_message,
            "execution_time_seconds": self.execution_time_seconds
        }
