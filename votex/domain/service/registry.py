"""Registry of entity kinds that opted into voting."""

from types import MappingProxyType
from typing import Iterable

from votex.domain.capability import EntityHandle, VotableHandle, VoterHandle
from votex.domain.error import RegistryConflictError, UnregisteredTypeError
from votex.domain.value import TypeTag

from .base import Service


class TypeRegistry(Service):
    """Maps type tags and entity classes to their capability handles.

    Built once from an explicit list of handles and never mutated
    afterwards, so one instance can be shared process-wide.
    """

    def __init__(self, handles: Iterable[EntityHandle] = ()) -> None:
        """Build the registry.

        Args:
            handles: Capability handles to register

        Raises:
            RegistryConflictError: If two handles share a type tag or entity class
        """
        by_tag: dict[TypeTag, EntityHandle] = {}
        by_class: dict[type, EntityHandle] = {}

        for handle in handles:
            if handle.type_tag in by_tag:
                raise RegistryConflictError(
                    f"Type tag {handle.type_tag!r} registered twice"
                )
            if handle.entity in by_class:
                raise RegistryConflictError(
                    f"{handle.entity.__name__} registered twice "
                    f"(as {by_class[handle.entity].type_tag!r} and {handle.type_tag!r})"
                )
            by_tag[handle.type_tag] = handle
            by_class[handle.entity] = handle

        self._by_tag = MappingProxyType(by_tag)
        self._by_class = MappingProxyType(by_class)

    def list_voters(self) -> frozenset[VoterHandle]:
        """Return handles of every entity kind that can vote."""
        return frozenset(h for h in self._by_tag.values() if isinstance(h, VoterHandle))

    def list_votables(self) -> frozenset[VotableHandle]:
        """Return handles of every entity kind that can be voted on."""
        return frozenset(
            h for h in self._by_tag.values() if isinstance(h, VotableHandle)
        )

    def lookup(self, type_tag: str) -> EntityHandle:
        """Find the handle registered under a type tag.

        Raises:
            UnregisteredTypeError: If no handle uses the tag
        """
        handle = self._by_tag.get(TypeTag(type_tag))
        if handle is None:
            raise UnregisteredTypeError(type_tag)
        return handle

    def lookup_voter(self, type_tag: str) -> VoterHandle:
        """Find a voter handle by type tag."""
        handle = self.lookup(type_tag)
        if not isinstance(handle, VoterHandle):
            raise UnregisteredTypeError(type_tag, "voter")
        return handle

    def lookup_votable(self, type_tag: str) -> VotableHandle:
        """Find a votable handle by type tag."""
        handle = self.lookup(type_tag)
        if not isinstance(handle, VotableHandle):
            raise UnregisteredTypeError(type_tag, "votable")
        return handle

    def tag_for(self, entity: type) -> TypeTag:
        """Resolve an entity class to its type tag.

        Subclasses of a registered entity resolve to the closest
        registered ancestor.

        Raises:
            UnregisteredTypeError: If neither the class nor an ancestor is registered
        """
        for cls in entity.__mro__:
            handle = self._by_class.get(cls)
            if handle is not None:
                return handle.type_tag
        raise UnregisteredTypeError(entity.__name__)

    def __contains__(self, type_tag: object) -> bool:
        return type_tag in self._by_tag

    def __len__(self) -> int:
        return len(self._by_tag)
