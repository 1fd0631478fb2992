"""
Tests for the sync orchestrator.
"""
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from nanosync import (
    IntegrationError,
    Process,
    ProcessOptions,
    SyncEngine,
    SyncStatus,
    create_process,
    create_schema,
    define_integration,
    sync,
    sync_all,
)
from tests.conftest import make_fields


def unvalidated_process(fields, source, target):
    options = ProcessOptions(fields=fields, source_integration=source, target_integration=target)
    return Process(options=options, schema=create_schema(fields, source, target))


class TestSync:

    @pytest.mark.asyncio
    async def test_successful_sync(self, process):
        result = await sync(process)

        assert result == {
            "fullName": "mutated_fullName_source_name_value",
            "userAge": "mutated_userAge_source_age_value",
        }

    @pytest.mark.asyncio
    async def test_logs_synced_process(self, process):
        diagnostics = MagicMock(spec=logging.Logger)

        await sync(process, logger=diagnostics)

        diagnostics.info.assert_called_once()
        assert diagnostics.info.call_args[0][0].startswith("Process synced")

    @pytest.mark.asyncio
    async def test_invalid_process_makes_no_resolver_calls(self):
        resolve_query = AsyncMock(return_value="value")
        resolve_mutation = AsyncMock(return_value="value")
        source = define_integration("source", resolve_query=resolve_query)
        target = define_integration("target", resolve_mutation=resolve_mutation)
        fields = make_fields(("name", "fullName", "string"), ("name", "nickname", "string"))
        diagnostics = MagicMock(spec=logging.Logger)

        result = await sync(unvalidated_process(fields, source, target), logger=diagnostics)

        assert result is None
        resolve_query.assert_not_called()
        resolve_mutation.assert_not_called()
        diagnostics.error.assert_called_once_with("Validation failed: Source fields must be unique")
        diagnostics.warning.assert_called_once_with("Process is invalid")

    @pytest.mark.asyncio
    async def test_query_failure_skips_mutation(self, mapped_fields):
        resolve_mutation = AsyncMock(return_value="value")
        source = define_integration(
            "source", resolve_query=AsyncMock(side_effect=IntegrationError("connection lost"))
        )
        target = define_integration("target", resolve_mutation=resolve_mutation)
        process = create_process(ProcessOptions(
            fields=mapped_fields, source_integration=source, target_integration=target
        ))
        diagnostics = MagicMock(spec=logging.Logger)

        result = await sync(process, logger=diagnostics)

        assert result is None
        resolve_mutation.assert_not_called()
        assert "Process sync failed" in diagnostics.error.call_args[0][0]

    @pytest.mark.asyncio
    async def test_mutation_failure_returns_none(self, mapped_fields, source_integration):
        target = define_integration("target", resolve_mutation=AsyncMock(side_effect=RuntimeError("boom")))
        process = create_process(ProcessOptions(
            fields=mapped_fields, source_integration=source_integration, target_integration=target
        ))

        assert await sync(process) is None

    @pytest.mark.asyncio
    async def test_sync_never_raises(self):
        assert await sync(None) is None
        assert await sync(object()) is None


class TestSyncEngine:

    @pytest.mark.asyncio
    async def test_completed_execution(self, process):
        execution = await SyncEngine().execute(process, triggered_by="manual")

        assert execution.status == SyncStatus.COMPLETED
        assert execution.succeeded
        assert execution.triggered_by == "manual"
        assert execution.query_results == {"name": "source_name_value", "age": "source_age_value"}
        assert execution.results["fullName"] == "mutated_fullName_source_name_value"
        assert execution.completed_at is not None
        assert execution.execution_time_seconds >= 0
        assert execution.get_summary()["fields_synced"] == 2

    @pytest.mark.asyncio
    async def test_failed_validation_execution(self, source_integration, target_integration):
        execution = await SyncEngine().execute(unvalidated_process([], source_integration, target_integration))

        assert execution.status == SyncStatus.FAILED
        assert execution.error_message == "Process is invalid"
        assert execution.query_results is None

    @pytest.mark.asyncio
    async def test_failed_resolution_execution(self, mapped_fields, target_integration):
        source = define_integration("source", resolve_query=AsyncMock(side_effect=IntegrationError("timeout")))
        process = create_process(ProcessOptions(
            fields=mapped_fields, source_integration=source, target_integration=target_integration
        ))

        execution = await SyncEngine().execute(process)

        assert execution.status == SyncStatus.FAILED
        assert "Query execution failed" in execution.error_message
        assert execution.results is None


class TestSyncAll:

    @pytest.mark.asyncio
    async def test_failing_process_does_not_abort_batch(self, process, source_integration, target_integration):
        invalid = unvalidated_process([], source_integration, target_integration)

        results = await sync_all([process, invalid, process])

        assert results[0] == results[2]
        assert results[0]["userAge"] == "mutated_userAge_source_age_value"
        assert results[1] is None


class TestMutationWithoutData:

    @pytest.mark.asyncio
    async def test_no_mutation_data_fails_the_sync(self, process):
        diagnostics = MagicMock(spec=logging.Logger)

        with patch("nanosync.engine.sync.resolve_target", AsyncMock(return_value=None)):
            execution = await SyncEngine(diagnostics).execute(process)
            result = await sync(process)

        assert result is None
        assert execution.status == SyncStatus.FAILED
        assert execution.error_message == "Mutation data unavailable"
        assert execution.results is None
        diagnostics.error.assert_called_once_with("Process sync failed: mutation data unavailable")


class TestExecutionTrigger:

    @pytest.mark.asyncio
    async def test_defaults_to_manual(self, process):
        execution = await SyncEngine().execute(process)

        assert execution.triggered_by == "manual"
        assert execution.started_at.tzinfo is not None
        assert execution.completed_at >= execution.started_at

    @pytest.mark.asyncio
    async def test_batch_executions_are_tagged(self, process, monkeypatch):
        triggers = []
        execute = SyncEngine.execute

        async def recording_execute(self, process, triggered_by="manual"):
            triggers.append(triggered_by)
            return await execute(self, process, triggered_by=triggered_by)

        monkeypatch.setattr(SyncEngine, "execute", recording_execute)
        await sync_all([process, process])

        assert triggers == ["batch", "batch"]
