"""Domain model entities for votex."""

from votex.domain.model.deletion import DeletionResult
from votex.domain.model.vote import PreloadedVote, Vote

__all__ = [
    "DeletionResult",
    "PreloadedVote",
    "Vote",
]
