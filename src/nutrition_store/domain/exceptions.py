"""Errors raised by key-value storage adapters."""


class StorageError(Exception):
    """Base error for failures of the underlying key-value storage."""


class StorageQuotaExceededError(StorageError):
    """Raised when a write would exceed the storage quota."""


class StorageAccessError(StorageError):
    """Raised when the storage cannot be read or written."""
