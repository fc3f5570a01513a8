"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class EmptyTextError(DomainError):
    """Raised when comment text is empty after trimming."""

    def __init__(self) -> None:
        super().__init__("Comment text must not be empty")


class NotFoundError(DomainError):
    """Raised when a referenced comment is not in the forest."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ParentNotFoundError(NotFoundError):
    """Raised when the parent of a reply is not in the forest."""

    def __init__(self, identifier: str):
        super().__init__("Parent comment", identifier)


class DepthExceededError(DomainError):
    """Raised when a node would sit deeper than the configured maximum."""

    def __init__(self, depth: int, max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(f"Depth {depth} exceeds maximum nesting depth {max_depth}")


class PersistenceUnavailableError(DomainError):
    """Raised when the forest could not be written to the blob store."""

    pass
