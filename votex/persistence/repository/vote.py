"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select, true
from sqlalchemy.ext.asyncio import AsyncSession

from votex.domain.model import Vote
from votex.domain.repository import VoteRepository
from votex.domain.value import Identifier, TypeTag, VoteCriteria, VoteId
from votex.persistence.mappers import row_to_vote, vote_to_dict
from votex.persistence.tables import votes_table


def _where(criteria: VoteCriteria):
    """Build the WHERE clause for a criteria (conjunction of equalities)."""
    return and_(
        true(),
        *(votes_table.c[field] == value for field, value in criteria.filters().items()),
    )


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Runs in a savepoint so a unique violation leaves the session usable.
        """
        vote_dict = vote_to_dict(vote)
        stmt = insert(votes_table).values(**vote_dict)
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_where(self, criteria: VoteCriteria) -> int:
        """Delete all votes matching the criteria."""
        if criteria.is_empty():
            raise ValueError("Refusing to delete votes without criteria")

        stmt = delete(votes_table).where(_where(criteria))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def find_one(self, criteria: VoteCriteria) -> Optional[Vote]:
        """Find the first vote matching the criteria."""
        stmt = (
            select(votes_table)
            .where(_where(criteria))
            .order_by(votes_table.c.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_all(self, criteria: VoteCriteria) -> List[Vote]:
        """Find all votes matching the criteria."""
        stmt = (
            select(votes_table)
            .where(_where(criteria))
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count(self, criteria: VoteCriteria) -> int:
        """Count votes matching the criteria."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(_where(criteria))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_voter_and_votables(
        self,
        voter_type: TypeTag,
        voter_id: Identifier,
        votable_type: TypeTag,
        votable_ids: Sequence[Identifier],
    ) -> List[Vote]:
        """Find a voter's votes on multiple votables (batch query)."""
        if not votable_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_type == voter_type,
                votes_table.c.voter_id == voter_id,
                votes_table.c.votable_type == votable_type,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        return [row_to_vote(row._asdict()) for row in rows]
