class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateIdError(ValidationError):
    """Raised when registering an employee id that already has a profile."""


class MissingSectionError(ValidationError):
    """Raised when an Engineering employee registers without a section."""


class DateAlreadyUsedError(ValidationError):
    """Raised when an employee already has an entry for the chosen date."""


class MissingRemarkError(ValidationError):
    """Raised when shift type 'other' is submitted without a remark."""


class JustificationTooShortError(ValidationError):
    """Raised when a rejection justification is under the minimum length."""


class InvalidTransitionError(ValidationError):
    """Raised when a decided entry is asked to take the opposite decision."""


class NotFoundError(DomainError):
    """Raised when an entry or profile id is absent at the store."""


class StoreFailureError(DomainError):
    """Raised when the underlying persistence call failed."""


class AuthenticationError(DomainError):
    """Raised when a gate code or manager password is invalid."""


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""
