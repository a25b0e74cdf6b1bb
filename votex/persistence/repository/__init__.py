"""PostgreSQL repository implementations."""

from votex.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresVoteRepository",
]
