"""
Exception hierarchy for the usage tool.

Every failure the tool can hit while measuring a command maps to one of
these types. Each carries the exit status the tool terminates with.
"""
from typing import Any, Dict, Optional

EXIT_FAILURE = 1
EXIT_EXEC_FAILURE = 127


class UsageError(Exception):
    """Base exception for all usage tool errors."""

    exit_code = EXIT_FAILURE

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            'error_type': self.__class__.__name__,
            'exit_code': self.exit_code,
            'message': self.message,
            'context': self.context
        }


class OSLevelError(UsageError):
    """An operating system call failed; the OS error text is kept in the message."""

    prefix = "Operation failed"

    def __init__(self, original_error: OSError, context: Optional[Dict[str, Any]] = None):
        reason = original_error.strerror or str(original_error)
        super().__init__(f"{self.prefix}: {reason}", context=context)
        self.original_error = original_error
        self.context.setdefault('errno', original_error.errno)


class SpawnError(OSLevelError):
    """The child process could not be created."""
    prefix = "Fork failed"


class ExecError(OSLevelError):
    """The child process could not execute the requested program."""
    prefix = "Exec failed"
    exit_code = EXIT_EXEC_FAILURE

    def __init__(self, program: str, original_error: OSError):
        super().__init__(original_error, context={'program': program})
        self.message = f"{self.message}: {program}"
        self.args = (self.message,)


class ClockError(OSLevelError):
    """The system clock could not be read."""

    def __init__(self, which: str, original_error: OSError):
        self.prefix = f"Failed to get {which} time"
        super().__init__(original_error, context={'which': which})


class UsageQueryError(OSLevelError):
    """Resource usage of terminated children could not be retrieved."""
    prefix = "Getrusage failed"


class ConfigError(UsageError):
    """The configuration file is malformed or holds an invalid value."""
    pass
