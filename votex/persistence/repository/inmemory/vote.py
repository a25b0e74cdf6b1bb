"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from votex.domain.model.vote import Vote
from votex.domain.repository.vote import VoteRepository
from votex.domain.value import Identifier, TypeTag, VoteCriteria, VoteId


def _matches(vote: Vote, criteria: VoteCriteria) -> bool:
    return all(getattr(vote, field) == value for field, value in criteria.filters().items())


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        # Mirror the uq_votex_vote constraint
        existing = await self.find_one(
            VoteCriteria(
                voter_type=vote.voter_type,
                voter_id=vote.voter_id,
                votable_type=vote.votable_type,
                votable_id=vote.votable_id,
            )
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote by ID."""
        self._votes = [v for v in self._votes if v.id != vote_id]

    async def delete_where(self, criteria: VoteCriteria) -> int:
        """Delete all votes matching the criteria."""
        if criteria.is_empty():
            raise ValueError("Refusing to delete votes without criteria")

        kept = [v for v in self._votes if not _matches(v, criteria)]
        deleted = len(self._votes) - len(kept)
        self._votes = kept
        return deleted

    async def find_one(self, criteria: VoteCriteria) -> Optional[Vote]:
        """Find the first vote matching the criteria."""
        for vote in self._votes:
            if _matches(vote, criteria):
                return vote
        return None

    async def find_all(self, criteria: VoteCriteria) -> list[Vote]:
        """Find all votes matching the criteria."""
        return [v for v in self._votes if _matches(v, criteria)]

    async def count(self, criteria: VoteCriteria) -> int:
        """Count votes matching the criteria."""
        return sum(1 for v in self._votes if _matches(v, criteria))

    async def find_by_voter_and_votables(
        self,
        voter_type: TypeTag,
        voter_id: Identifier,
        votable_type: TypeTag,
        votable_ids: Sequence[Identifier],
    ) -> list[Vote]:
        """Find a voter's votes on multiple votables (batch query)."""
        if not votable_ids:
            return []

        wanted = set(votable_ids)
        return [
            v
            for v in self._votes
            if v.voter_type == voter_type
            and v.voter_id == voter_id
            and v.votable_type == votable_type
            and v.votable_id in wanted
        ]
