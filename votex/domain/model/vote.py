"""Vote entity.

A vote links one voter instance to one votable instance. Both sides are
referenced by type tag and identifier, so any registered entity kind can
vote on any other without a join table per pair.
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from votex.domain.model.common import DomainModel
from votex.domain.value import Identifier, TypeTag, VotableKey, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per votable (enforced by the storage unique constraint)
    - Identifiers are never null; the resolver rejects unsaved instances
    - Never updated after creation
    """

    id: VoteId
    voter_type: TypeTag
    voter_id: Identifier
    votable_type: TypeTag
    votable_id: Identifier
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def votable_key(self) -> VotableKey:
        return VotableKey(votable_type=self.votable_type, votable_id=self.votable_id)


class PreloadedVote(DomainModel):
    """A vote with its voter and votable instances attached.

    Either side is None when its handle could not load the entity
    (e.g. it was deleted without running cleanup).
    """

    vote: Vote
    voter: Any | None = None
    votable: Any | None = None
