"""Cached aggregate maintenance for votables."""

from typing import Iterable

import logfire

from votex.domain.capability import VotableHandle
from votex.domain.value import Identifier, TypeTag, VotableKey

from .base import Service
from .registry import TypeRegistry


class AggregateCacheUpdater(Service):
    """Pushes vote state changes to votable recalculation hooks.

    Recalculation runs synchronously right after the vote write, once
    per created or removed vote. Hook failures propagate to the caller;
    the vote write is not undone.
    """

    def __init__(self, registry: TypeRegistry) -> None:
        """Initialize cache updater.

        Args:
            registry: Registry used to find votable handles by tag
        """
        self.registry = registry

    async def recalculate(
        self,
        handle: VotableHandle,
        votable_type: TypeTag,
        votable_id: Identifier,
        increment: bool,
    ) -> None:
        """Run a votable's recalculation hook.

        Args:
            handle: Votable handle owning the hook
            votable_type: Votable type tag
            votable_id: Votable identifier
            increment: True after a vote was created, False after removal
        """
        with logfire.span(
            "recalculate_cache",
            votable_type=votable_type,
            votable_id=votable_id,
            increment=increment,
        ):
            await handle.recalculate_cache(votable_id, increment)

    async def recalculate_many(
        self, votables: Iterable[VotableKey], increment: bool
    ) -> int:
        """Recalculate each distinct votable exactly once.

        Args:
            votables: Votable references, possibly repeated
            increment: Direction of the change

        Returns:
            Number of distinct votables recalculated
        """
        seen: set[VotableKey] = set()
        for key in votables:
            if key in seen:
                continue
            seen.add(key)
            handle = self.registry.lookup_votable(key.votable_type)
            await self.recalculate(handle, key.votable_type, key.votable_id, increment)
        return len(seen)
