"""Domain value objects for votex."""

from enum import Enum
from typing import Any

from votex.domain.value.common import ValueObject
from votex.domain.value.identifiers import Identifier, TypeTag


class DeletionStatus(str, Enum):
    """Outcome of an entity deletion performed by the host application."""

    OK = "ok"
    ERROR = "error"


class VotableKey(ValueObject):
    """A votable reference: type tag plus identifier."""

    votable_type: TypeTag
    votable_id: Identifier


class VoteCriteria(ValueObject):
    """Conjunction of equality filters over vote fields.

    Unset fields do not constrain the match. An empty criteria matches
    every vote, so repositories refuse it for destructive operations.
    """

    voter_type: TypeTag | None = None
    voter_id: Identifier | None = None
    votable_type: TypeTag | None = None
    votable_id: Identifier | None = None

    def filters(self) -> dict[str, Any]:
        """Return the set filters as a field -> value mapping."""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.filters()
