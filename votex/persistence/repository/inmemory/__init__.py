"""In-memory repository implementations for testing."""

from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryVoteRepository",
]
