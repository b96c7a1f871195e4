class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class RecordStoreError(BaseServiceError):
    """Base exception for record store errors."""
    pass

class CollectionNotFoundError(RecordStoreError):
    """Raised when a collection cannot be resolved by name or id."""

    def __init__(self, name_or_id: str):
        self.name_or_id = name_or_id
        super().__init__(f"Collection not found: {name_or_id}")

class RecordNotFoundError(RecordStoreError):
    """Raised when a record is not found."""

    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"Record {record_id} not found in {collection}")

class RecordPersistError(RecordStoreError):
    """Raised when a create, update or delete is rejected by storage."""
    pass

class InvalidFilterError(RecordStoreError):
    """Raised when a filter expression cannot be parsed or bound."""
    pass

class HookError(BaseServiceError):
    """Raised when a bound handler fails and aborts its chain."""

    def __init__(self, kind: str, collection: str, cause: Exception):
        self.kind = kind
        self.collection = collection
        self.cause = cause
        super().__init__(f"Handler for {kind} on '{collection}' failed: {cause}")
