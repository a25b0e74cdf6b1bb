"""Vote cleanup after voter or votable deletion."""

import logfire

from votex.domain.model import DeletionResult
from votex.domain.value import DeletionStatus

from .base import Service
from .cache_updater import AggregateCacheUpdater
from .resolver import PolymorphicResolver
from .vote_store import VoteStore


class CleanupCoordinator(Service):
    """Removes votes orphaned by an entity deletion.

    The host application deletes the entity and hands over the outcome;
    failed deletions are passed back untouched.
    """

    def __init__(
        self,
        vote_store: VoteStore,
        resolver: PolymorphicResolver,
        cache_updater: AggregateCacheUpdater,
    ) -> None:
        """Initialize cleanup coordinator.

        Args:
            vote_store: Vote record operations
            resolver: Polymorphic resolver
            cache_updater: Cache updater for affected votables
        """
        self.vote_store = vote_store
        self.resolver = resolver
        self.cache_updater = cache_updater

    async def cleanup_votes(self, result: DeletionResult) -> DeletionResult:
        """Clean up the votes of a deleted voter.

        Every votable the voter voted for is decremented once, using the
        vote set read before deletion, then all of the voter's votes are
        removed.

        Args:
            result: Outcome of the voter deletion

        Returns:
            The result with votes_removed set, or the failed result unchanged
        """
        match result:
            case DeletionResult(status=DeletionStatus.OK, entity=voter):
                pass
            case _:
                logfire.info("Skipping voter cleanup after failed deletion")
                return result

        voter_type, voter_id = self.resolver.resolve_voter(voter)
        with logfire.span("cleanup_votes", voter_type=voter_type, voter_id=voter_id):
            votes = await self.vote_store.find_by_voter(voter_type, voter_id)
            recalculated = await self.cache_updater.recalculate_many(
                (vote.votable_key for vote in votes), increment=False
            )
            removed = await self.vote_store.delete_all_by_voter(voter_type, voter_id)

            logfire.info(
                "Voter votes cleaned up",
                voter_type=voter_type,
                voter_id=voter_id,
                votes_removed=removed,
                votables_recalculated=recalculated,
            )
            return result.model_copy(update={"votes_removed": removed})

    async def cleanup_votable(self, result: DeletionResult) -> DeletionResult:
        """Clean up the votes received by a deleted votable.

        No recalculation happens since the votable no longer exists.

        Args:
            result: Outcome of the votable deletion

        Returns:
            The result with votes_removed set, or the failed result unchanged
        """
        match result:
            case DeletionResult(status=DeletionStatus.OK, entity=votable):
                pass
            case _:
                logfire.info("Skipping votable cleanup after failed deletion")
                return result

        votable_type, votable_id = self.resolver.resolve_votable(votable)
        with logfire.span(
            "cleanup_votable", votable_type=votable_type, votable_id=votable_id
        ):
            removed = await self.vote_store.delete_all_by_votable(
                votable_type, votable_id
            )

            logfire.info(
                "Votable votes cleaned up",
                votable_type=votable_type,
                votable_id=votable_id,
                votes_removed=removed,
            )
            return result.model_copy(update={"votes_removed": removed})
