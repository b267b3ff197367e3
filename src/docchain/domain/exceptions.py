"""Domain exceptions."""


class DocChainError(Exception):
    """Base exception for docchain."""

    pass


class NotFoundError(DocChainError):
    """Document or version does not exist or does not belong to its parent."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"{resource} {identifier} not found")
        self.resource = resource
        self.identifier = identifier


class ConflictError(DocChainError):
    """Concurrent write produced a duplicate or inconsistent version."""

    pass


class RestoreInProgressError(ConflictError):
    """A restore for the same document is already in flight."""

    pass


class ChainIntegrityError(DocChainError):
    """Stored version chain violates its linear, gap-free shape."""

    pass


class ValidationError(DocChainError):
    """Validation failed for input data."""

    pass


class TransportError(DocChainError):
    """Network failure, timeout or non-success response at the HTTP boundary."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
