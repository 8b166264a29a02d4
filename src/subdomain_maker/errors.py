"""Custom exceptions for the subdomain generator."""


class SubdomainMakerError(Exception):
    """Base exception for this project."""

    exit_code = 1


class ConfigError(SubdomainMakerError):
    """Raised when runtime configuration is invalid."""

    exit_code = 2


class WordlistError(SubdomainMakerError):
    """Raised when a wordlist source cannot be opened or read."""


class OutputError(SubdomainMakerError):
    """Raised when the output destination cannot be prepared or written."""


class ResourceLimitError(SubdomainMakerError):
    """Raised when a storage quota, file size, or candidate cap is exceeded."""

    exit_code = 3
