"""Domain layer errors."""

from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Client-fault error: the caller's input was bad."""

    pass


class FieldErrorReason(str, Enum):
    """Why a request field was rejected."""

    MISSING = "missing"
    MALFORMED = "malformed"
    OUT_OF_RANGE = "out_of_range"


class InvalidFieldError(ValidationError):
    """Raised when a single request field fails validation."""

    def __init__(self, field: str, reason: FieldErrorReason, message: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {message}")


class InvalidGuestLinkIdError(ValidationError):
    """Raised when a guest link identifier does not have the expected format."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Invalid guest link ID: {identifier!r}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyExistsError(DomainError):
    """Raised by repositories when an insert collides with an existing record."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")
