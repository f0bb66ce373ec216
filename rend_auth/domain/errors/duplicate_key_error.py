"""Unique-constraint violation raised by user repositories."""


class DuplicateKeyError(Exception):
    """Insert or update collided with an existing unique identity field.

    Unlike domain errors this is raised: it models the store's unique index
    rejecting a write, and callers that race on find-or-create catch it and
    retry as a lookup.

    Attributes:
        field: Unique field that collided (username, email, wallet_address,
            federated_id).
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Duplicate value for unique field: {field}")
