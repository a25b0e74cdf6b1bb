"""Deletion result passed to vote cleanup."""

from typing import Any

from votex.domain.model.common import DomainModel
from votex.domain.value import DeletionStatus


class DeletionResult(DomainModel):
    """Outcome of deleting a voter or votable entity.

    The host application performs the deletion and wraps the outcome in
    this model; cleanup only acts on successful deletions.
    """

    status: DeletionStatus
    entity: Any
    error: str | None = None
    votes_removed: int = 0

    @classmethod
    def succeeded(cls, entity: Any) -> "DeletionResult":
        return cls(status=DeletionStatus.OK, entity=entity)

    @classmethod
    def failed(cls, entity: Any, error: str) -> "DeletionResult":
        return cls(status=DeletionStatus.ERROR, entity=entity, error=error)

    @property
    def ok(self) -> bool:
        return self.status == DeletionStatus.OK
