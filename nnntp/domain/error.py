"""Domain layer errors.

Every failure the server can report is one of these. The dispatcher maps
them onto protocol status codes.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class RequestValidationError(ValidationError):
    """A request envelope does not have the shape its operation needs."""

    pass


class MissingFieldError(RequestValidationError):
    """Raised when a required envelope field is absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is required")


class InvalidFieldError(RequestValidationError):
    """Raised when a present field cannot be used (wrong type or format)."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field} {reason}")


class UnknownRequestTypeError(RequestValidationError):
    """Raised when the type discriminator is missing or not recognised."""

    def __init__(self, message: str = "valid type is required"):
        super().__init__(message)


class AuthenticationError(DomainError):
    """Base for credential failures."""

    pass


class InvalidUserError(AuthenticationError):
    """Raised when a username/password pair does not match."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Invalid credentials for user {username}")


class UnknownUserError(AuthenticationError):
    """Raised when verifying credentials for a username that does not exist."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User not found: {username}")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class DuplicateUserError(BusinessRuleViolationError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("User already exists")


class ParentPostNotFoundError(BusinessRuleViolationError):
    """Raised under the strict comment policy when the parent post is missing."""

    def __init__(self, parent_id: int):
        self.parent_id = parent_id
        super().__init__(f"Post not found: {parent_id}")


class StorageFailureError(DomainError):
    """Raised when the storage backend fails."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Storage failure during {operation}")
