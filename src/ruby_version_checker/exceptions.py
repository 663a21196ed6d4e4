"""
Custom exceptions for ruby-version-checker.

Every error that ends a run derives from RubyVersionCheckerError so the
command line entry point can catch them in one place. Malformed feed rows are
not errors; the parser drops them without raising.
"""


class RubyVersionCheckerError(Exception):
    """
    Base exception for all ruby-version-checker errors.

    All custom exceptions should inherit from this class so callers can
    catch every application-specific failure at once.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        """
        Initialize the exception.

        Args:
            message: The primary error message.
            details: Optional additional context about the error.
        """
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(RubyVersionCheckerError):
    """
    Exception raised when configuration is invalid or missing.

    This includes:
    - Unreadable configuration files
    - Invalid YAML documents
    - Invalid configuration values
    """

    pass


class ConfigFileError(ConfigurationError):
    """Exception raised when the configuration file cannot be read or parsed."""

    pass


class ConfigValidationError(ConfigurationError):
    """Exception raised when a configuration value fails validation."""

    pass


# =============================================================================
# Fetch Errors
# =============================================================================


class FetchError(RubyVersionCheckerError):
    """
    Exception raised when the release index cannot be retrieved.

    This includes:
    - Insecure (non-https) source URLs
    - Connection, DNS and TLS failures
    - Timeouts
    - Non-success HTTP status codes

    Attributes:
        url: The URL that was being fetched.
        status_code: The HTTP status code, when the server answered.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        details: str | None = None,
    ) -> None:
        """
        Initialize the fetch exception.

        Args:
            message: The primary error message.
            url: The URL that was being fetched.
            status_code: The HTTP status code returned by the server.
            details: Optional additional context.
        """
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


# =============================================================================
# Parse Errors
# =============================================================================


class ParseError(RubyVersionCheckerError):
    """
    Exception raised when the release index has no usable header.

    Raised for empty input and for headers that lack a required column.
    Individual malformed rows never raise this.
    """

    pass
