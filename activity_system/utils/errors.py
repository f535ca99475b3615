"""Custom exception classes for the Programming Activity System."""


class ActivitySystemError(Exception):
    """Base exception for all Programming Activity System errors."""
    pass


class ConfigurationError(ActivitySystemError):
    """Raised when there's a configuration error."""
    pass


class ValidationError(ActivitySystemError):
    """Raised when a validation result is unwrapped without a value."""
    pass


class ContractViolationError(ActivitySystemError):
    """Raised when a caller breaks a precondition of a pure computation."""
    pass
