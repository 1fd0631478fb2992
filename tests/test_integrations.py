"""
Tests for the integration helpers.
"""
import pytest

from nanosync import IntegrationError, MemoryIntegration, define_integration
from nanosync.integrations import BaseIntegration, get_capabilities, get_integration


class TestMemoryIntegration:

    @pytest.mark.asyncio
    async def test_reads_record_values(self):
        integration = MemoryIntegration("crm", {"name": "Ada", "age": 36})

        assert await integration.resolve_query("name") == "Ada"
        assert await integration.resolve_query("age") == 36

    @pytest.mark.asyncio
    async def test_missing_field(self):
        integration = MemoryIntegration("crm", {})

        with pytest.raises(IntegrationError, match="email"):
            await integration.resolve_query("email")

    @pytest.mark.asyncio
    async def test_writes_values(self):
        integration = MemoryIntegration("warehouse")

        assert await integration.resolve_mutation("fullName", "Ada") == "Ada"
        assert integration.record == {"fullName": "Ada"}

    def test_record_is_copied(self):
        record = {"name": "Ada"}
        integration = MemoryIntegration("crm", record)
        integration.record["name"] = "Grace"

        assert record == {"name": "Ada"}

    @pytest.mark.asyncio
    async def test_lifecycle_hooks(self):
        async with MemoryIntegration("crm") as integration:
            assert await integration.authenticate() is True
        assert await integration.disconnect() is True


class TestCapabilities:

    def test_base_integration_capabilities(self):
        capabilities = MemoryIntegration("crm").get_capabilities()

        assert capabilities.can_query
        assert capabilities.can_mutate

    def test_function_integration_capabilities(self):
        integration = define_integration("read only", resolve_query=lambda key: key)

        assert integration.get_capabilities().can_query
        assert not integration.get_capabilities().can_mutate

    def test_duck_typed_object(self):
        class Sheet:
            name = "sheet"

            async def resolve_query(self, key):
                return key

        capabilities = get_capabilities(Sheet())
        assert capabilities.can_query and not capabilities.can_mutate

    def test_base_integration_is_abstract(self):
        with pytest.raises(TypeError):
            BaseIntegration("abstract")


class TestRegistry:

    def test_get_integration(self):
        assert get_integration("memory") is MemoryIntegration

    def test_unknown_integration(self):
        with pytest.raises(ValueError, match="Unknown integration type"):
            get_integration("airtable")
