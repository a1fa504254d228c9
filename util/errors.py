# util/errors.py


class StoreError(Exception):
    # Flow: repositories raise StoreError subclasses; ImageService maps them to a 500.
    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class IndexStoreError(StoreError):
    """Key index store unreachable or rejected the command."""


class MalformedIndexError(StoreError):
    """Stored index value is not a JSON array of strings."""


class BlobStoreError(StoreError):
    """Blob store failed for a reason other than a missing object."""
