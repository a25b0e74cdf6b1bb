"""Domain value objects for votex."""

from votex.domain.value.identifiers import (
    Identifier,
    TypeTag,
    VoteId,
    to_identifier,
)
from votex.domain.value.types import DeletionStatus, VotableKey, VoteCriteria

__all__ = [
    # Identifiers
    "Identifier",
    "TypeTag",
    "VoteId",
    "to_identifier",
    # Types
    "DeletionStatus",
    "VotableKey",
    "VoteCriteria",
]
