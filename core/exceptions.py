# file: core/exceptions.py
"""
Defines the custom exception hierarchy for the command library.
"""

class CommandError(Exception):
    """Base exception for all command-related errors."""
    pass

# --- Configuration Errors ---
class ConfigurationError(CommandError):
    """Error related to loading, parsing, or saving configuration."""
    pass

# --- Command Errors ---
class CommandParameterError(CommandError, TypeError):
    """
    Raised when a caller-supplied parameter cannot be converted to the
    command's declared parameter type. Supplying a correctly typed value
    is the caller's responsibility.
    """
    pass

class InvalidCommandTargetError(CommandError, TypeError):
    """Raised when an action, predicate or listener is not callable."""
    pass
