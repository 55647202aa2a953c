"""
Standard exit codes for gffonts_index commands.

Following Unix/POSIX conventions for command-line tools.
"""

# Standard POSIX exit codes
SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # General errors
USAGE_ERROR = 2          # Misuse of shell command (wrong arguments, etc.)

# Application-specific exit codes (64-113 are typically available)
NO_FAMILIES_FOUND = 64   # No METADATA.pb files found matching criteria
DATA_ERROR = 70          # Metadata or tag file format error
PARTIAL_SUCCESS = 71     # Some families parsed, some failed

# Exit code mappings for common exceptions
EXCEPTION_EXIT_CODES = {
    'TagFileError': DATA_ERROR,
    'TagFormatError': DATA_ERROR,
    'UnterminatedQuoteError': DATA_ERROR,
    'MissingFallbackLanguageError': DATA_ERROR,
}


def get_exit_code_for_exception(exc: Exception) -> int:
    """
    Get the appropriate exit code for an exception.

    Args:
        exc: The exception that occurred

    Returns:
        Appropriate exit code
    """
    exc_name = exc.__class__.__name__
    return EXCEPTION_EXIT_CODES.get(exc_name, GENERAL_ERROR)


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class NoFamiliesFoundError(CommandError):
    """Raised when no families match the given criteria."""
    def __init__(self, message: str = "No families found"):
        super().__init__(message, NO_FAMILIES_FOUND)


class PartialSuccessError(CommandError):
    """Raised when some families parse and some fail."""
    def __init__(self, message: str, succeeded: int = 0, failed: int = 0):
        super().__init__(message, PARTIAL_SUCCESS)
        self.succeeded = succeeded
        self.failed = failed
