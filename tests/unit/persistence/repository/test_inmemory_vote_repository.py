"""Unit tests for InMemoryVoteRepository."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from votex.domain.model import Vote
from votex.domain.value import Identifier, TypeTag, VoteCriteria, VoteId
from votex.persistence.repository.inmemory import InMemoryVoteRepository


def make_vote(voter_id: str, votable_type: str, votable_id: str) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        voter_type=TypeTag("User"),
        voter_id=Identifier(voter_id),
        votable_type=TypeTag(votable_type),
        votable_id=Identifier(votable_id),
    )


class TestInMemoryVoteRepository:
    """Tests for the in-memory persistence collaborator."""

    @pytest.mark.asyncio
    async def test_save_rejects_duplicate_tuple(self):
        repo = InMemoryVoteRepository()
        await repo.save(make_vote("1", "Post", "42"))

        with pytest.raises(IntegrityError):
            await repo.save(make_vote("1", "Post", "42"))

    @pytest.mark.asyncio
    async def test_criteria_is_a_conjunction(self):
        repo = InMemoryVoteRepository()
        await repo.save(make_vote("1", "Post", "42"))
        await repo.save(make_vote("1", "Comment", "42"))

        found = await repo.find_all(
            VoteCriteria(votable_type=TypeTag("Comment"), votable_id=Identifier("42"))
        )

        assert len(found) == 1
        assert found[0].votable_type == "Comment"

    @pytest.mark.asyncio
    async def test_empty_criteria_matches_everything_for_reads(self):
        repo = InMemoryVoteRepository()
        await repo.save(make_vote("1", "Post", "42"))
        await repo.save(make_vote("2", "Post", "42"))

        assert await repo.count(VoteCriteria()) == 2

    @pytest.mark.asyncio
    async def test_delete_where_refuses_empty_criteria(self):
        repo = InMemoryVoteRepository()
        await repo.save(make_vote("1", "Post", "42"))

        with pytest.raises(ValueError, match="without criteria"):
            await repo.delete_where(VoteCriteria())

        assert await repo.count(VoteCriteria()) == 1

    @pytest.mark.asyncio
    async def test_delete_by_id(self):
        repo = InMemoryVoteRepository()
        vote = await repo.save(make_vote("1", "Post", "42"))

        await repo.delete(vote.id)

        assert await repo.find_one(VoteCriteria(voter_id=Identifier("1"))) is None

    @pytest.mark.asyncio
    async def test_batch_query_with_no_ids_returns_empty(self):
        repo = InMemoryVoteRepository()
        await repo.save(make_vote("1", "Post", "42"))

        votes = await repo.find_by_voter_and_votables(
            TypeTag("User"), Identifier("1"), TypeTag("Post"), []
        )

        assert votes == []
