"""Vote domain service."""

from collections import defaultdict
from typing import Any, Iterable, Mapping

import logfire

from votex.domain.error import VoteNotFoundError
from votex.domain.model import DeletionResult, PreloadedVote, Vote
from votex.domain.value import Identifier, TypeTag, VotableKey

from .base import Service
from .cache_updater import AggregateCacheUpdater
from .cleanup import CleanupCoordinator
from .registry import TypeRegistry
from .resolver import PolymorphicResolver
from .vote_store import VoteStore


class VoteService(Service):
    """Domain service for vote operations.

    Entry point for host applications: takes entity instances, resolves
    them polymorphically and keeps votable caches in step with the vote
    records.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        resolver: PolymorphicResolver,
        vote_store: VoteStore,
        cache_updater: AggregateCacheUpdater,
        cleanup: CleanupCoordinator,
    ) -> None:
        """Initialize vote service.

        Args:
            registry: Registry of voter/votable handles
            resolver: Polymorphic resolver
            vote_store: Vote record operations
            cache_updater: Votable cache updater
            cleanup: Cleanup coordinator for entity deletions
        """
        self.registry = registry
        self.resolver = resolver
        self.vote_store = vote_store
        self.cache_updater = cache_updater
        self.cleanup = cleanup

    async def vote_by(self, votable: Any, voter: Any) -> Vote:
        """Cast a vote.

        Creates the vote record, then recalculates the votable's cache.

        Args:
            votable: Votable entity instance
            voter: Voter entity instance

        Returns:
            Created vote

        Raises:
            UnregisteredTypeError: If either kind lacks the capability
            MissingIdentifierError: If either instance is unsaved
            DuplicateVoteError: If the voter already voted for the votable
        """
        votable_type, votable_id = self.resolver.resolve_votable(votable)
        voter_type, voter_id = self.resolver.resolve_voter(voter)

        with logfire.span(
            "vote_by",
            voter_type=voter_type,
            voter_id=voter_id,
            votable_type=votable_type,
            votable_id=votable_id,
        ):
            vote = await self.vote_store.create(
                voter_type, voter_id, votable_type, votable_id
            )

            handle = self.registry.lookup_votable(votable_type)
            await self.cache_updater.recalculate(
                handle, votable_type, votable_id, increment=True
            )

            logfire.info("Vote cast", vote_id=str(vote.id))
            return vote

    async def unvote_by(self, votable: Any, voter: Any) -> None:
        """Remove a vote.

        Deletes the vote record, then recalculates the votable's cache.

        Args:
            votable: Votable entity instance
            voter: Voter entity instance

        Raises:
            VoteNotFoundError: If the voter has not voted for the votable
        """
        votable_type, votable_id = self.resolver.resolve_votable(votable)
        voter_type, voter_id = self.resolver.resolve_voter(voter)

        with logfire.span(
            "unvote_by",
            voter_type=voter_type,
            voter_id=voter_id,
            votable_type=votable_type,
            votable_id=votable_id,
        ):
            vote = await self.vote_store.find_one(
                voter_type, voter_id, votable_type, votable_id
            )
            if vote is None:
                logfire.warn(
                    "No vote to remove",
                    voter_type=voter_type,
                    voter_id=voter_id,
                    votable_type=votable_type,
                    votable_id=votable_id,
                )
                raise VoteNotFoundError(voter_type, voter_id, votable_type, votable_id)

            await self.vote_store.delete_one(vote)

            handle = self.registry.lookup_votable(votable_type)
            await self.cache_updater.recalculate(
                handle, votable_type, votable_id, increment=False
            )

            logfire.info("Vote removed", vote_id=str(vote.id))

    async def votes_for(
        self, votable: Any, preload: bool = False
    ) -> list[Vote] | list[PreloadedVote]:
        """List the votes a votable received.

        Args:
            votable: Votable entity instance
            preload: Attach voter and votable instances to each vote

        Returns:
            Votes in insertion order
        """
        votable_type, votable_id = self.resolver.resolve_votable(votable)
        votes = await self.vote_store.find_by_votable(votable_type, votable_id)
        return await self._preload(votes) if preload else votes

    async def votes_by(
        self, voter: Any, preload: bool = False
    ) -> list[Vote] | list[PreloadedVote]:
        """List the votes a voter cast, across all votable kinds.

        Args:
            voter: Voter entity instance
            preload: Attach voter and votable instances to each vote

        Returns:
            Votes in insertion order
        """
        voter_type, voter_id = self.resolver.resolve_voter(voter)
        votes = await self.vote_store.find_by_voter(voter_type, voter_id)
        return await self._preload(votes) if preload else votes

    async def voted_for(self, voter: Any, votable: Any) -> bool:
        """Check whether a voter has voted for a votable."""
        votable_type, votable_id = self.resolver.resolve_votable(votable)
        voter_type, voter_id = self.resolver.resolve_voter(voter)

        vote = await self.vote_store.find_one(
            voter_type, voter_id, votable_type, votable_id
        )
        return vote is not None

    async def voted_for_each(
        self, voter: Any, votables: Iterable[Any]
    ) -> dict[VotableKey, bool]:
        """Check which of several votables a voter has voted for.

        Issues one query per votable kind instead of one per votable.

        Args:
            voter: Voter entity instance
            votables: Votable entity instances, possibly of mixed kinds

        Returns:
            Mapping of votable key (type tag and identifier) to whether the
            voter voted for it
        """
        voter_type, voter_id = self.resolver.resolve_voter(voter)

        ids_by_type: dict[TypeTag, list[Identifier]] = defaultdict(list)
        for votable in votables:
            votable_type, votable_id = self.resolver.resolve_votable(votable)
            ids_by_type[votable_type].append(votable_id)

        result: dict[VotableKey, bool] = {}
        for votable_type, votable_ids in ids_by_type.items():
            votes = await self.vote_store.find_by_voter_and_votables(
                voter_type, voter_id, votable_type, votable_ids
            )
            # Convert list of votes to set of voted IDs for O(1) lookup
            voted_ids = {vote.votable_id for vote in votes}
            for vid in votable_ids:
                key = VotableKey(votable_type=votable_type, votable_id=vid)
                result[key] = vid in voted_ids
        return result

    async def vote_count(self, votable: Any) -> int:
        """Count the votes a votable received, straight from the vote records."""
        votable_type, votable_id = self.resolver.resolve_votable(votable)
        return await self.vote_store.count_by_votable(votable_type, votable_id)

    async def cleanup_votes(self, result: DeletionResult) -> DeletionResult:
        """Clean up after a voter deletion (see CleanupCoordinator)."""
        return await self.cleanup.cleanup_votes(result)

    async def cleanup_votable(self, result: DeletionResult) -> DeletionResult:
        """Clean up after a votable deletion (see CleanupCoordinator)."""
        return await self.cleanup.cleanup_votable(result)

    async def _preload(self, votes: list[Vote]) -> list[PreloadedVote]:
        """Attach voter and votable instances, one load per entity kind."""
        voters = await self._load_all((v.voter_type, v.voter_id) for v in votes)
        votables = await self._load_all((v.votable_type, v.votable_id) for v in votes)

        return [
            PreloadedVote(
                vote=vote,
                voter=voters.get((vote.voter_type, vote.voter_id)),
                votable=votables.get((vote.votable_type, vote.votable_id)),
            )
            for vote in votes
        ]

    async def _load_all(
        self, refs: Iterable[tuple[TypeTag, Identifier]]
    ) -> Mapping[tuple[TypeTag, Identifier], Any]:
        ids_by_type: dict[TypeTag, set[Identifier]] = defaultdict(set)
        for type_tag, identifier in refs:
            ids_by_type[type_tag].add(identifier)

        loaded: dict[tuple[TypeTag, Identifier], Any] = {}
        for type_tag, identifiers in ids_by_type.items():
            instances = await self.registry.lookup(type_tag).load(sorted(identifiers))
            loaded.update({(type_tag, i): e for i, e in instances.items()})
        return loaded
