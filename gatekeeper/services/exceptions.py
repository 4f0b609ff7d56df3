"""Provides exceptions occurring with external services."""


class InvalidToken(RuntimeError):
    """The session token is malformed or could not be verified."""


class ExpiredToken(RuntimeError):
    """The session token has expired."""


class ClientConfigurationError(RuntimeError):
    """A client registration is missing required data or is malformed."""
