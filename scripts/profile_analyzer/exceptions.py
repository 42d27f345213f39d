#------------------------------------------------------------
#                        exceptions.py
#        Defines errors raised by the fetcher and the
#                    dashboard controller.

from typing import Optional

class AnalyzerError(Exception):
    """Base class for profile analyzer failures."""

class ProfileNotFound(AnalyzerError):

    # This function does capture the failed handle and its message.
    # status_code stays None when no HTTP response arrived.
    def __init__(self, handle: str, message: str, status_code: Optional[int] = None):
        self.handle = handle
        self.message = message
        self.status_code = status_code
        super().__init__(message)

class RoleError(AnalyzerError):
    """Raised when an action is not available for the current dashboard role."""
