"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from votex.domain.service import TypeRegistry
from votex.util.di import PROVIDERS, RegistryProvider, get_provider


def create_container(registry: TypeRegistry | None = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Args:
        registry: Type registry to use; built from settings.voting.handles if omitted

    Returns:
        Configured DI container with production providers

    Usage:
        container = create_container(TypeRegistry([user_handle, post_handle]))
        async with container() as request_container:
            votes = await request_container.get(VoteService)
            await votes.vote_by(post, user)
    """
    # Get provider instances - all are instantiated without arguments
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances, RegistryProvider(registry))
