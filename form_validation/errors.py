class FormValidationError(Exception):
    """Base error for the form validation engine."""


class ConfigError(FormValidationError):
    """Raised when a form configuration cannot be used to build a validator."""
