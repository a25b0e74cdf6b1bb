"""Generic vote record operations."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from votex.domain.error import DuplicateVoteError
from votex.domain.model import Vote
from votex.domain.repository import VoteRepository
from votex.domain.value import Identifier, TypeTag, VoteCriteria, VoteId

from .base import Service


class VoteStore(Service):
    """Vote CRUD keyed by type tag and identifier pairs.

    Nothing here knows about concrete entity classes; callers resolve
    instances first.
    """

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote store.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def create(
        self,
        voter_type: TypeTag,
        voter_id: Identifier,
        votable_type: TypeTag,
        votable_id: Identifier,
    ) -> Vote:
        """Insert a new vote record.

        Raises:
            DuplicateVoteError: If the voter already voted for the votable
        """
        now = datetime.now()
        vote = Vote(
            id=VoteId(uuid4()),
            voter_type=voter_type,
            voter_id=voter_id,
            votable_type=votable_type,
            votable_id=votable_id,
            created_at=now,
            updated_at=now,
        )

        try:
            return await self.vote_repository.save(vote)
        except IntegrityError:
            logfire.warn(
                "Duplicate vote attempt",
                voter_type=voter_type,
                voter_id=voter_id,
                votable_type=votable_type,
                votable_id=votable_id,
            )
            raise DuplicateVoteError(voter_type, voter_id, votable_type, votable_id)

    async def find_one(
        self,
        voter_type: TypeTag,
        voter_id: Identifier,
        votable_type: TypeTag,
        votable_id: Identifier,
    ) -> Vote | None:
        """Find the vote a voter cast on a votable, if any."""
        return await self.vote_repository.find_one(
            VoteCriteria(
                voter_type=voter_type,
                voter_id=voter_id,
                votable_type=votable_type,
                votable_id=votable_id,
            )
        )

    async def find_by_voter(self, voter_type: TypeTag, voter_id: Identifier) -> list[Vote]:
        """All votes cast by one voter, across votable kinds."""
        return await self.vote_repository.find_all(
            VoteCriteria(voter_type=voter_type, voter_id=voter_id)
        )

    async def find_by_votable(
        self, votable_type: TypeTag, votable_id: Identifier
    ) -> list[Vote]:
        """All votes received by one votable."""
        return await self.vote_repository.find_all(
            VoteCriteria(votable_type=votable_type, votable_id=votable_id)
        )

    async def find_by_voter_and_votables(
        self,
        voter_type: TypeTag,
        voter_id: Identifier,
        votable_type: TypeTag,
        votable_ids: list[Identifier],
    ) -> list[Vote]:
        """A voter's votes on several votables of one kind (batch)."""
        return await self.vote_repository.find_by_voter_and_votables(
            voter_type, voter_id, votable_type, votable_ids
        )

    async def count_by_votable(self, votable_type: TypeTag, votable_id: Identifier) -> int:
        """Number of votes received by one votable."""
        return await self.vote_repository.count(
            VoteCriteria(votable_type=votable_type, votable_id=votable_id)
        )

    async def delete_one(self, vote: Vote) -> None:
        """Delete a single vote record by its id."""
        await self.vote_repository.delete(vote.id)

    async def delete_all_by_voter(self, voter_type: TypeTag, voter_id: Identifier) -> int:
        """Delete every vote cast by a voter.

        Returns:
            Number of votes deleted
        """
        return await self.vote_repository.delete_where(
            VoteCriteria(voter_type=voter_type, voter_id=voter_id)
        )

    async def delete_all_by_votable(
        self, votable_type: TypeTag, votable_id: Identifier
    ) -> int:
        """Delete every vote referencing a votable.

        Returns:
            Number of votes deleted
        """
        return await self.vote_repository.delete_where(
            VoteCriteria(votable_type=votable_type, votable_id=votable_id)
        )
