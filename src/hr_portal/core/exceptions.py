class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateEmail(ValidationError):
    def __init__(self, message: str = "Email already registered"):
        super().__init__(message)


class WeakPassword(ValidationError):
    def __init__(self, message: str = "Password must be at least 6 characters"):
        super().__init__(message)


class UnknownAccount(ValidationError):
    def __init__(self, message: str = "Email does not match any existing account"):
        super().__init__(message)


class SelfDeletionForbidden(ValidationError):
    def __init__(self, message: str = "Cannot delete your own account"):
        super().__init__(message)


class EmptyItemList(ValidationError):
    def __init__(self, message: str = "Must have at least one item"):
        super().__init__(message)


class AuthError(DomainError):
    """Raised when sign-in or an authenticated action is refused."""


class InvalidCredentials(AuthError):
    def __init__(self, message: str = "Invalid credentials or email not verified"):
        super().__init__(message)


class ReferentialError(DomainError):
    """Raised when a command points at an entity that no longer exists."""


class StoreError(DomainError):
    """Persistence failure.

    Returned as a value by the persistent store, never raised into callers.
    """
