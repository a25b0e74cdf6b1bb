"""Strongly typed identifiers for votex.

Voters and votables are referenced polymorphically: a type tag names the
entity kind and an opaque identifier names the instance within that kind.
"""

from typing import Any, NewType
from uuid import UUID

VoteId = NewType("VoteId", UUID)

# Entity kind name, e.g. "User" or "Post"
TypeTag = NewType("TypeTag", str)

# Persisted key of a voter or votable, stored in its string form
Identifier = NewType("Identifier", str)


def to_identifier(value: Any) -> Identifier:
    """Normalize an entity key (int, UUID, str) to an opaque Identifier."""
    return Identifier(str(value))
