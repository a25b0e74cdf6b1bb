"""Unit tests for VoteStore."""

import pytest

from votex.domain.error import DuplicateVoteError
from votex.domain.service import VoteStore
from votex.domain.value import Identifier, TypeTag
from votex.persistence.repository.inmemory import InMemoryVoteRepository

USER = TypeTag("User")
POST = TypeTag("Post")
COMMENT = TypeTag("Comment")


@pytest.fixture
def store() -> VoteStore:
    return VoteStore(vote_repository=InMemoryVoteRepository())


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_returns_persisted_vote(self, store):
        vote = await store.create(USER, Identifier("1"), POST, Identifier("42"))

        assert vote.voter_type == "User"
        assert vote.voter_id == "1"
        assert vote.votable_type == "Post"
        assert vote.votable_id == "42"
        assert vote.created_at == vote.updated_at
        assert await store.find_one(USER, "1", POST, "42") == vote

    @pytest.mark.asyncio
    async def test_duplicate_raises(self, store):
        await store.create(USER, "1", POST, "42")

        with pytest.raises(DuplicateVoteError, match="already voted"):
            await store.create(USER, "1", POST, "42")

    @pytest.mark.asyncio
    async def test_same_ids_different_kinds_are_distinct(self, store):
        await store.create(USER, "1", POST, "42")
        await store.create(USER, "1", COMMENT, "42")

        assert len(await store.find_by_voter(USER, "1")) == 2


class TestQueries:
    """Tests for find and count operations."""

    @pytest.mark.asyncio
    async def test_find_one_missing_returns_none(self, store):
        assert await store.find_one(USER, "1", POST, "42") is None

    @pytest.mark.asyncio
    async def test_find_by_voter_spans_votable_kinds_in_insertion_order(self, store):
        first = await store.create(USER, "1", POST, "42")
        await store.create(USER, "2", POST, "42")
        second = await store.create(USER, "1", COMMENT, "c1")

        votes = await store.find_by_voter(USER, "1")

        assert votes == [first, second]

    @pytest.mark.asyncio
    async def test_find_by_votable(self, store):
        await store.create(USER, "1", POST, "42")
        await store.create(USER, "2", POST, "42")
        await store.create(USER, "1", POST, "43")

        votes = await store.find_by_votable(POST, "42")

        assert [v.voter_id for v in votes] == ["1", "2"]
        assert await store.count_by_votable(POST, "42") == 2

    @pytest.mark.asyncio
    async def test_find_by_voter_and_votables(self, store):
        await store.create(USER, "1", POST, "42")
        await store.create(USER, "1", POST, "44")

        votes = await store.find_by_voter_and_votables(
            USER, "1", POST, ["42", "43", "44"]
        )

        assert sorted(v.votable_id for v in votes) == ["42", "44"]


class TestDelete:
    """Tests for delete operations."""

    @pytest.mark.asyncio
    async def test_delete_one(self, store):
        vote = await store.create(USER, "1", POST, "42")

        await store.delete_one(vote)

        assert await store.find_one(USER, "1", POST, "42") is None

    @pytest.mark.asyncio
    async def test_delete_all_by_voter_leaves_other_voters(self, store):
        await store.create(USER, "1", POST, "42")
        await store.create(USER, "1", COMMENT, "c1")
        await store.create(USER, "2", POST, "42")

        removed = await store.delete_all_by_voter(USER, "1")

        assert removed == 2
        assert await store.find_by_voter(USER, "1") == []
        assert len(await store.find_by_voter(USER, "2")) == 1

    @pytest.mark.asyncio
    async def test_delete_all_by_votable(self, store):
        await store.create(USER, "1", POST, "42")
        await store.create(USER, "2", POST, "42")
        await store.create(USER, "2", POST, "43")

        removed = await store.delete_all_by_votable(POST, "42")

        assert removed == 2
        assert await store.count_by_votable(POST, "43") == 1
