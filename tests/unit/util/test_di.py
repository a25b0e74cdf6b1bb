"""Unit tests for dependency injection wiring."""

from dishka import make_async_container
import pytest

from votex.domain.capability import VotableHandle, VoterHandle
from votex.domain.service import TypeRegistry, VoteService
from votex.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from votex.util.di.core import RegistryProvider, import_handle, import_handles
from votex.util.error import ConfigurationError
from tests.di import MockPersistenceProvider, build_test_container
from tests.entities import build_registry


class TestImportHandle:
    """Tests for loading handles from dotted paths."""

    def test_instance_attribute(self):
        handle = import_handle("tests.entities:user_handle")

        assert isinstance(handle, VoterHandle)
        assert handle.type_tag == "User"

    def test_factory_attribute(self):
        handle = import_handle("tests.entities:post_handle")

        assert isinstance(handle, VotableHandle)
        assert handle.type_tag == "Post"

    @pytest.mark.parametrize("path", ["tests.entities", ":user_handle", "tests.entities:"])
    def test_malformed_path(self, path):
        with pytest.raises(ConfigurationError, match="Invalid handle path"):
            import_handle(path)

    def test_missing_module(self):
        with pytest.raises(ConfigurationError, match="Cannot import"):
            import_handle("tests.no_such_module:handle")

    def test_missing_attribute(self):
        with pytest.raises(ConfigurationError, match="Cannot import"):
            import_handle("tests.entities:no_such_handle")

    def test_factory_returning_something_else(self):
        with pytest.raises(ConfigurationError, match="not a capability handle"):
            import_handle("tests.entities:build_registry")

    def test_import_handles_keeps_order(self):
        handles = import_handles(["tests.entities:post_handle", "tests.entities:user_handle"])

        assert [h.type_tag for h in handles] == ["Post", "User"]


class TestRegistryProvider:
    """Tests for the registry provider."""

    @pytest.mark.asyncio
    async def test_explicit_registry_wins(self, monkeypatch):
        monkeypatch.setenv("VOTING__HANDLES", '["tests.entities:user_handle"]')
        registry = build_registry()
        container = make_async_container(ProdConfigProvider(), RegistryProvider(registry))

        assert await container.get(TypeRegistry) is registry

        await container.close()

    @pytest.mark.asyncio
    async def test_builds_registry_from_settings(self, monkeypatch):
        monkeypatch.setenv(
            "VOTING__HANDLES",
            '["tests.entities:user_handle", "tests.entities:post_handle"]',
        )
        container = make_async_container(ProdConfigProvider(), RegistryProvider())

        registry = await container.get(TypeRegistry)

        assert {h.type_tag for h in registry.list_voters()} == {"User"}
        assert {h.type_tag for h in registry.list_votables()} == {"Post"}

        await container.close()


class TestGetProvider:
    """Tests for provider selection."""

    def test_concrete_provider_is_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_mockable_component_selects_by_flag(self):
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider


class TestBuildTestContainer:
    """Tests for the test container builder."""

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"bluesky"})

    @pytest.mark.asyncio
    async def test_request_scope_provides_vote_service(self):
        registry = build_registry()
        container = build_test_container(registry=registry)

        async with container() as request_container:
            service = await request_container.get(VoteService)
            assert service.registry is registry
            assert await request_container.get(TypeRegistry) is registry

        await container.close()
