"""Pet simulation exception hierarchy.

Player-facing failures are returned as values, never raised. These classes
are for programming and setup errors only, so callers can catch narrowly.
"""


class PetSimError(Exception):
    """Root of all pet simulation exceptions."""


class ContentError(PetSimError):
    """A static content table is malformed."""


class ConfigurationError(PetSimError):
    """Invalid or missing engine configuration."""
