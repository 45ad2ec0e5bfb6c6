"""Exception hierarchy for todocal operations."""


class TodoCalError(Exception):
    """Base exception for todocal operations."""

    pass


class ValidationError(TodoCalError):
    """Item data rejected before it reaches storage."""

    pass


class ItemNotFoundError(TodoCalError):
    """No item with the requested id in the store."""

    pass


class StorageError(TodoCalError):
    """Store could not be read or written."""

    pass


class UnsupportedBackendError(TodoCalError):
    """Configured storage backend is not known."""

    pass
