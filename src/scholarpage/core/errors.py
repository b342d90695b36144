class ScholarPageError(Exception):
    """Base error for all user-facing scholarpage exceptions."""


class ConfigurationError(ScholarPageError):
    """Raised when configuration is invalid or incomplete."""


class PublicationSourceError(ScholarPageError):
    """Raised when the bibliography file cannot be read."""
