"""Domain layer errors.

Each error carries a stable ``code`` that the interface layer returns to
clients alongside the HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domain_error"


class InvalidArgumentError(DomainError):
    """Malformed input (bad limit, unsupported vote type, unknown timeframe)."""

    code = "invalid_argument"


class UnauthorizedError(DomainError):
    """A mutating operation was attempted without an identity."""

    code = "unauthorized"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ItemNotFoundError(NotFoundError):
    """Content item is absent or unpublished."""

    def __init__(self, identifier: str):
        super().__init__("Item", identifier)


class ConflictError(DomainError):
    """The request conflicts with the current state."""

    code = "conflict"


class SelfVoteForbiddenError(ConflictError):
    """Raised when an author tries to vote on their own item."""

    code = "self_vote_forbidden"

    def __init__(self, item_id: str, user_id: str):
        self.item_id = item_id
        self.user_id = user_id
        super().__init__(f"User {user_id} cannot vote on their own item {item_id}")


class DuplicateVoteError(ConflictError):
    """A vote for this (item, user) pair already exists in the ledger."""

    code = "duplicate_vote"

    def __init__(self, item_id: str, user_id: str):
        self.item_id = item_id
        self.user_id = user_id
        super().__init__(f"User {user_id} already voted on item {item_id}")
