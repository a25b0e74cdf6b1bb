"""Repository interfaces for votex domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from votex.domain.repository.vote import VoteRepository

__all__ = [
    "VoteRepository",
]
