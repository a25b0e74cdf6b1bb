"""Voter and votable capabilities.

An entity kind takes part in voting by registering a handle for it.
The handle knows the entity class, the type tag stored on vote records,
how to read an instance's persisted key and how to load instances back
by key. Votable handles also own the cache recalculation hook.

A handle may subclass both VoterHandle and VotableHandle, e.g. for users
who vote and can be voted on.

Example:
    class PostHandle(VotableHandle):
        def __init__(self, posts: PostRepository) -> None:
            super().__init__(Post)
            self.posts = posts

        async def load(self, identifiers):
            ...

        async def recalculate_cache(self, votable_id, increment):
            await self.posts.adjust_votes_count(votable_id, 1 if increment else -1)
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from votex.domain.value import Identifier, TypeTag


class EntityHandle(ABC):
    """Base capability handle for a registered entity kind."""

    def __init__(self, entity: type, type_tag: str | None = None) -> None:
        """Initialize handle.

        Args:
            entity: Entity class this handle is registered for
            type_tag: Tag stored on vote records (defaults to the class name)
        """
        self.entity = entity
        self.type_tag = TypeTag(type_tag or entity.__name__)

    def get_identifier(self, instance: Any) -> Any | None:
        """Return the instance's persisted key, or None if it was never saved."""
        return getattr(instance, "id", None)

    @abstractmethod
    async def load(self, identifiers: Sequence[Identifier]) -> Mapping[Identifier, Any]:
        """Load entity instances by identifier.

        Missing identifiers are simply absent from the returned mapping.

        Args:
            identifiers: Identifiers to load

        Returns:
            Mapping of identifier to entity instance
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type_tag})"


class VoterHandle(EntityHandle):
    """Capability handle for entity kinds that cast votes."""


class VotableHandle(EntityHandle):
    """Capability handle for entity kinds that receive votes."""

    @abstractmethod
    async def recalculate_cache(self, votable_id: Identifier, increment: bool) -> None:
        """Recalculate the votable's cached aggregate fields.

        Called once after every vote creation (increment=True) and once
        per vote removal (increment=False).

        Args:
            votable_id: Identifier of the votable whose vote set changed
            increment: Whether a vote was added (True) or removed (False)
        """
        pass
