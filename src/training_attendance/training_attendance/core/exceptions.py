class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class TimeParseError(ValidationError):
    """Raised when an "HH:MM" string cannot be parsed."""


class InternalConsistencyError(DomainError):
    """Raised when date formatting and parsing stop being exact inverses."""


class LookupContractError(DomainError):
    """Raised when a collaborator returns a value outside its contract."""
