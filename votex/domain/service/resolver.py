"""Polymorphic resolution of entity instances."""

from typing import Any

import logfire

from votex.domain.error import MissingIdentifierError
from votex.domain.value import Identifier, TypeTag, to_identifier

from .base import Service
from .registry import TypeRegistry


class PolymorphicResolver(Service):
    """Turns entity instances into (type tag, identifier) pairs."""

    def __init__(self, registry: TypeRegistry) -> None:
        """Initialize resolver.

        Args:
            registry: Registry of voter/votable handles
        """
        self.registry = registry

    def extract_fields(
        self, votable: Any | None = None, voter: Any | None = None
    ) -> tuple[TypeTag | None, TypeTag | None]:
        """Derive the type tags of a votable and a voter.

        Either side may be omitted when the caller only needs the other.

        Returns:
            (votable_type, voter_type), None for an omitted side

        Raises:
            UnregisteredTypeError: If an instance's class is not registered
        """
        votable_type = self.registry.tag_for(type(votable)) if votable is not None else None
        voter_type = self.registry.tag_for(type(voter)) if voter is not None else None
        return votable_type, voter_type

    def get_id_for(self, type_tag: TypeTag, instance: Any) -> Identifier:
        """Read an instance's persisted identifier.

        Raises:
            MissingIdentifierError: If the instance has not been persisted
        """
        raw = self.registry.lookup(type_tag).get_identifier(instance)
        if raw is None:
            logfire.warn("Entity without identifier", type_tag=type_tag)
            raise MissingIdentifierError(type_tag)
        return to_identifier(raw)

    def resolve_voter(self, voter: Any) -> tuple[TypeTag, Identifier]:
        """Resolve a voter instance, requiring the voter capability."""
        _, voter_type = self.extract_fields(voter=voter)
        self.registry.lookup_voter(voter_type)
        return voter_type, self.get_id_for(voter_type, voter)

    def resolve_votable(self, votable: Any) -> tuple[TypeTag, Identifier]:
        """Resolve a votable instance, requiring the votable capability."""
        votable_type, _ = self.extract_fields(votable=votable)
        self.registry.lookup_votable(votable_type)
        return votable_type, self.get_id_for(votable_type, votable)
