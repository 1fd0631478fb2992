"""
Main sync engine that orchestrates data synchronization between integrations.
"""

import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional

from ..models.fields import FieldValue
from ..models.sync import SyncExecution, SyncStatus
from .resolver import resolve_source, resolve_target
from .validation import validate_process


class SyncEngine:
    """
    Executes processes: validate, resolve the source, resolve the target.

    Execution never raises. Every failure is reported on the engine's logger
    and recorded on the returned SyncExecution, so a caller iterating many
    processes is never interrupted by one of them.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    async def execute(self, process: Any, triggered_by: str = "manual") -> SyncExecution:
        """
        Sync a single process.

        Args:
            process: Process created by create_process
            triggered_by: What triggered this sync (manual, cli, batch)

        Returns:
            SyncExecution with the mutation results or the failure
        """
        execution = SyncExecution(id=str(uuid.uuid4()), triggered_by=triggered_by)

        if not validate_process(process, self.logger):
            self.logger.warning("Process is invalid")
            execution.mark_failed("Process is invalid")
            return execution
        execution.status = SyncStatus.VALIDATED

        try:
            execution.status = SyncStatus.RUNNING
            execution.query_results = await resolve_source(process)
            mutation_results = await resolve_target(process, execution.query_results)
        except Exception as e:
            self.logger.error(f"Process sync failed: {e}")
            execution.mark_failed(str(e))
            return execution

        if mutation_results is None:
            self.logger.error("Process sync failed: mutation data unavailable")
            execution.mark_failed("Mutation data unavailable")
            return execution

        execution.mark_completed(mutation_results)
        self.logger.info(f"Process synced: {mutation_results}")
        return execution


async def sync(process: Any, logger: Optional[logging.Logger] = None,
               triggered_by: str = "manual") -> Optional[Dict[str, FieldValue]]:
    """Sync a process, returning the mutation results or None on any failure."""
    execution = await SyncEngine(logger).execute(process, triggered_by=triggered_by)
    return execution.results if execution.succeeded else None


async def sync_all(processes: Iterable[Any],
                   logger: Optional[logging.Logger] = None) -> List[Optional[Dict[str, FieldValue]]]:
    """Sync processes one after another, one result (or None) per process."""
    engine = SyncEngine(logger)
    results = []
    for process in processes:
        execution = await engine.execute(process, triggered_by="batch")
        results.append(execution.results if execution.succeeded else None)
    return results
