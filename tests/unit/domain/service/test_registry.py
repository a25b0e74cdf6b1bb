"""Unit tests for TypeRegistry."""

import pytest

from votex.domain.error import RegistryConflictError, UnregisteredTypeError
from votex.domain.service import TypeRegistry
from tests.entities import (
    Admin,
    Comment,
    CountingCache,
    Organization,
    Post,
    Tag,
    User,
    UserHandle,
    build_registry,
)


class TestListing:
    """Tests for capability listing."""

    def test_list_voters_includes_voter_handles_only(self):
        registry = build_registry()

        tags = {h.type_tag for h in registry.list_voters()}

        assert tags == {"User", "Org"}

    def test_list_votables_includes_votable_handles_only(self):
        registry = build_registry()

        tags = {h.type_tag for h in registry.list_votables()}

        assert tags == {"Post", "Comment", "Org"}

    def test_empty_registry(self):
        registry = TypeRegistry()

        assert registry.list_voters() == frozenset()
        assert registry.list_votables() == frozenset()
        assert len(registry) == 0


class TestLookup:
    """Tests for lookup by tag."""

    def test_lookup_returns_registered_handle(self):
        posts = CountingCache(Post)
        registry = TypeRegistry([UserHandle(User), posts])

        assert registry.lookup("Post") is posts
        assert "Post" in registry

    def test_lookup_unknown_tag_raises(self):
        registry = build_registry()

        with pytest.raises(UnregisteredTypeError, match="Tag"):
            registry.lookup("Tag")

    def test_lookup_votable_rejects_voter_only_kind(self):
        registry = build_registry()

        with pytest.raises(UnregisteredTypeError, match="votable") as exc_info:
            registry.lookup_votable("User")

        assert exc_info.value.type_tag == "User"
        assert exc_info.value.capability == "votable"

    def test_lookup_voter_rejects_votable_only_kind(self):
        registry = build_registry()

        with pytest.raises(UnregisteredTypeError, match="voter"):
            registry.lookup_voter("Post")

    def test_handle_with_both_capabilities_passes_both_lookups(self):
        registry = build_registry()

        assert registry.lookup_voter("Org") is registry.lookup_votable("Org")


class TestTagFor:
    """Tests for class to tag resolution."""

    def test_defaults_to_class_name(self):
        registry = build_registry()

        assert registry.tag_for(Comment) == "Comment"

    def test_explicit_type_tag(self):
        registry = build_registry()

        assert registry.tag_for(Organization) == "Org"

    def test_subclass_resolves_to_registered_ancestor(self):
        registry = build_registry()

        assert registry.tag_for(Admin) == "User"

    def test_unregistered_class_raises(self):
        registry = build_registry()

        with pytest.raises(UnregisteredTypeError):
            registry.tag_for(Tag)


class TestConflicts:
    """Tests for registration conflicts."""

    def test_duplicate_tag_raises(self):
        with pytest.raises(RegistryConflictError, match="registered twice"):
            TypeRegistry([CountingCache(Post), CountingCache(Comment, type_tag="Post")])

    def test_same_entity_twice_raises(self):
        with pytest.raises(RegistryConflictError, match="Post registered twice"):
            TypeRegistry([CountingCache(Post), CountingCache(Post, type_tag="Article")])
