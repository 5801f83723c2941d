"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class RemoteStoreError(Exception):
    """Raised when the remote record store reports a failure.

    Carries the raw response body as the only diagnostic detail. Transport
    failures (DNS, connection reset, timeout) are reported the same way.
    """

    def __init__(self, body: str):
        self.body = body
        super().__init__(body or "Remote store request failed")


class OperationInProgressError(Exception):
    """Raised when a save is triggered while one for the same key is in flight."""

    def __init__(self, collection: str, key: str):
        self.collection = collection
        self.key = key
        super().__init__(f"A save for {collection} '{key}' is already in progress")
