class DomainError(Exception):
    """Base exception for business rule violations."""


class AuthenticationError(DomainError):
    """Raised when a bearer token is missing, malformed or expired."""


class LoginTakenError(DomainError):
    """Raised by the credential store when a login is already in use."""


class InfrastructureError(Exception):
    """Raised when the store (or another backing service) cannot be reached.

    Kept outside DomainError so the HTTP layer maps it to a 5xx.
    """


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing or too weak."""
