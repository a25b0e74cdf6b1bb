"""Core DI providers (non-mockable)."""

import importlib
from typing import Iterable

from dishka import Scope, provide

from votex.config import Settings
from votex.domain.capability import EntityHandle
from votex.domain.service import TypeRegistry
from votex.util.di.base import ProviderBase
from votex.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()


def import_handle(path: str) -> EntityHandle:
    """Import a capability handle from a "package.module:attribute" path.

    The attribute may be a handle instance or a zero-argument factory.

    Raises:
        ConfigurationError: If the path is malformed or does not yield a handle
    """
    module_name, sep, attribute = path.partition(":")
    if not sep or not module_name or not attribute:
        raise ConfigurationError(
            f"Invalid handle path {path!r}, expected 'package.module:attribute'"
        )

    try:
        target = getattr(importlib.import_module(module_name), attribute)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(f"Cannot import handle {path!r}: {e}") from e

    handle = target if isinstance(target, EntityHandle) else target()
    if not isinstance(handle, EntityHandle):
        raise ConfigurationError(
            f"{path!r} produced {type(handle).__name__}, not a capability handle"
        )
    return handle


def import_handles(paths: Iterable[str]) -> list[EntityHandle]:
    return [import_handle(path) for path in paths]


class RegistryProvider(ProviderBase):
    """Type registry provider - one registry for the whole process.

    Uses the registry given at construction, or builds one from the
    handle paths in settings.
    """

    def __init__(self, registry: TypeRegistry | None = None) -> None:
        super().__init__()
        self.registry = registry

    @provide(scope=Scope.APP)
    def provide_registry(self, settings: Settings) -> TypeRegistry:
        """Provide the type registry."""
        if self.registry is not None:
            return self.registry
        return TypeRegistry(import_handles(settings.voting.handles))
