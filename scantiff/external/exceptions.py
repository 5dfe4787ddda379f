# scantiff/external/exceptions.py
"""
Custom exceptions for external tool errors in the scantiff converter.
"""


class ExternalToolError(Exception):
    """Base exception for converter, opener and trash tool errors"""
    def __init__(self, message, command=None, returncode=None, error_type=None):
        self.message = message
        self.command = command
        self.returncode = returncode
        self.error_type = error_type
        super().__init__(self.message)


class MissingDependencyError(ExternalToolError):
    """A required tool is not on PATH. Fatal."""
    def __init__(self, message, capability=None, searched=None):
        super().__init__(message, error_type="missing_dependency")
        self.capability = capability
        self.searched = searched or []


class CommandFailure(ExternalToolError):
    """A tool ran and exited non-zero (or could not be started)."""
    def __init__(self, message, command=None, returncode=None):
        super().__init__(message, command=command, returncode=returncode, error_type="command_failure")


class UserAbortError(Exception):
    """Raised when the user declines to continue after a command failure."""
    def __init__(self, message, failed_action=None, returncode=None):
        super().__init__(message)
        self.error_type = "aborted_by_user"
        self.failed_action = failed_action
        self.returncode = returncode
