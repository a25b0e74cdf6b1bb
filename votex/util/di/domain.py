"""Domain layer DI providers."""

from dishka import Scope, provide

from votex.domain.repository import VoteRepository
from votex.domain.service import (
    AggregateCacheUpdater,
    CleanupCoordinator,
    PolymorphicResolver,
    TypeRegistry,
    VoteService,
    VoteStore,
)
from votex.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each unit of work gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_resolver(self, registry: TypeRegistry) -> PolymorphicResolver:
        """Provide polymorphic resolver."""
        return PolymorphicResolver(registry=registry)

    @provide
    def get_vote_store(self, vote_repository: VoteRepository) -> VoteStore:
        """Provide vote store."""
        return VoteStore(vote_repository=vote_repository)

    @provide
    def get_cache_updater(self, registry: TypeRegistry) -> AggregateCacheUpdater:
        """Provide votable cache updater."""
        return AggregateCacheUpdater(registry=registry)

    @provide
    def get_cleanup_coordinator(
        self,
        vote_store: VoteStore,
        resolver: PolymorphicResolver,
        cache_updater: AggregateCacheUpdater,
    ) -> CleanupCoordinator:
        """Provide cleanup coordinator."""
        return CleanupCoordinator(
            vote_store=vote_store,
            resolver=resolver,
            cache_updater=cache_updater,
        )

    @provide
    def get_vote_service(
        self,
        registry: TypeRegistry,
        resolver: PolymorphicResolver,
        vote_store: VoteStore,
        cache_updater: AggregateCacheUpdater,
        cleanup: CleanupCoordinator,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            registry=registry,
            resolver=resolver,
            vote_store=vote_store,
            cache_updater=cache_updater,
            cleanup=cleanup,
        )
