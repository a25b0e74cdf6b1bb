"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from votex.domain.model.vote import Vote
from votex.domain.value import Identifier, TypeTag, VoteCriteria, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the voter already voted for the votable
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete
        """
        pass

    @abstractmethod
    async def delete_where(self, criteria: VoteCriteria) -> int:
        """Delete every vote matching the criteria.

        Args:
            criteria: Equality filters; must not be empty

        Returns:
            Number of votes deleted

        Raises:
            ValueError: If criteria is empty
        """
        pass

    @abstractmethod
    async def find_one(self, criteria: VoteCriteria) -> Optional[Vote]:
        """Find the first vote matching the criteria.

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, criteria: VoteCriteria) -> List[Vote]:
        """Find all votes matching the criteria, in insertion order."""
        pass

    @abstractmethod
    async def count(self, criteria: VoteCriteria) -> int:
        """Count votes matching the criteria."""
        pass

    @abstractmethod
    async def find_by_voter_and_votables(
        self,
        voter_type: TypeTag,
        voter_id: Identifier,
        votable_type: TypeTag,
        votable_ids: Sequence[Identifier],
    ) -> List[Vote]:
        """Find a voter's votes on multiple votables of one kind (batch query).

        Args:
            voter_type: Voter type tag
            voter_id: Voter identifier
            votable_type: Type tag of the votables
            votable_ids: Votable identifiers to check

        Returns:
            List of votes by the voter on the specified votables
        """
        pass
