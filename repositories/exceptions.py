from typing import Optional


class StorageError(Exception):
    """Raised (or returned as a Failure) when the backing store cannot complete a statement."""

    def __init__(self, message: str, original: Optional[Exception] = None):
        super().__init__(message)
        self.original = original
