"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class UnregisteredTypeError(DomainError):
    """Raised when an entity kind was never registered as voter or votable."""

    def __init__(self, type_tag: str, capability: str | None = None):
        self.type_tag = type_tag
        self.capability = capability
        if capability:
            super().__init__(f"{type_tag} is not registered as {capability}")
        else:
            super().__init__(f"{type_tag} is not a registered entity kind")


class RegistryConflictError(DomainError):
    """Raised when two handles claim the same type tag or entity class."""

    pass


class MissingIdentifierError(DomainError):
    """Raised when an entity instance has no persisted identifier."""

    def __init__(self, type_tag: str):
        self.type_tag = type_tag
        super().__init__(f"{type_tag} instance has no persisted identifier")


class VoteNotFoundError(DomainError):
    """Raised when removing a vote that does not exist."""

    def __init__(
        self, voter_type: str, voter_id: str, votable_type: str, votable_id: str
    ):
        self.voter_type = voter_type
        self.voter_id = voter_id
        self.votable_type = votable_type
        self.votable_id = votable_id
        super().__init__(
            f"Vote not found: {voter_type}#{voter_id} -> {votable_type}#{votable_id}"
        )


class DuplicateVoteError(DomainError):
    """Raised when a voter already voted for the votable."""

    def __init__(
        self, voter_type: str, voter_id: str, votable_type: str, votable_id: str
    ):
        super().__init__(
            f"{voter_type}#{voter_id} already voted for {votable_type}#{votable_id}"
        )
