"""Domain services."""

from .base import Service
from .cache_updater import AggregateCacheUpdater
from .cleanup import CleanupCoordinator
from .registry import TypeRegistry
from .resolver import PolymorphicResolver
from .vote_service import VoteService
from .vote_store import VoteStore

__all__ = [
    "AggregateCacheUpdater",
    "CleanupCoordinator",
    "PolymorphicResolver",
    "Service",
    "TypeRegistry",
    "VoteService",
    "VoteStore",
]
