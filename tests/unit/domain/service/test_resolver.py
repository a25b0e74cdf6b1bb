"""Unit tests for PolymorphicResolver."""

from uuid import uuid4

import pytest

from votex.domain.error import MissingIdentifierError, UnregisteredTypeError
from votex.domain.service import PolymorphicResolver
from tests.entities import Admin, Comment, Post, Tag, User, build_registry


@pytest.fixture
def resolver() -> PolymorphicResolver:
    return PolymorphicResolver(build_registry())


class TestExtractFields:
    """Tests for extract_fields."""

    def test_both_sides(self, resolver):
        votable_type, voter_type = resolver.extract_fields(
            Post(id=42, title="t"), User(id=1, name="alice")
        )

        assert votable_type == "Post"
        assert voter_type == "User"

    def test_votable_only(self, resolver):
        assert resolver.extract_fields(Post(id=42, title="t"), None) == ("Post", None)

    def test_voter_only(self, resolver):
        assert resolver.extract_fields(voter=User(id=1, name="a")) == (None, "User")

    def test_unregistered_kind_raises(self, resolver):
        with pytest.raises(UnregisteredTypeError):
            resolver.extract_fields(Tag(id=1, name="python"))


class TestGetIdFor:
    """Tests for get_id_for."""

    def test_int_key_becomes_string(self, resolver):
        assert resolver.get_id_for("User", User(id=1, name="alice")) == "1"

    def test_uuid_key_becomes_string(self, resolver):
        comment_id = uuid4()

        assert resolver.get_id_for("Comment", Comment(id=comment_id, text="x")) == str(
            comment_id
        )

    def test_unsaved_instance_raises(self, resolver):
        with pytest.raises(MissingIdentifierError, match="Post"):
            resolver.get_id_for("Post", Post(title="draft"))


class TestResolve:
    """Tests for capability-checked resolution."""

    def test_resolve_voter(self, resolver):
        assert resolver.resolve_voter(Admin(id=7, name="root")) == ("User", "7")

    def test_resolve_votable(self, resolver):
        assert resolver.resolve_votable(Post(id=42, title="t")) == ("Post", "42")

    def test_votable_used_as_voter_raises(self, resolver):
        with pytest.raises(UnregisteredTypeError, match="voter"):
            resolver.resolve_voter(Post(id=42, title="t"))

    def test_voter_used_as_votable_raises(self, resolver):
        with pytest.raises(UnregisteredTypeError, match="votable"):
            resolver.resolve_votable(User(id=1, name="alice"))
