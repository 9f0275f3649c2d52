"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class StorageError(DomainError):
    """A storage backend rejected a write or delete."""


def invalid_record_kind(kind: str) -> str:
    """Return message for an unknown record kind."""
    return f"Unknown record type '{kind}'. Expected SALE or REPLACEMENT"


def create_failed(reason: Exception) -> str:
    """Return message for a rejected remote write."""
    return f"Failed to save record: {reason}"


def delete_failed(record_id: str, reason: Exception) -> str:
    """Return message for a rejected remote delete."""
    return f"Failed to delete record {record_id}: {reason}"
