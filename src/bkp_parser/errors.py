"""
Exceptions raised by the BKP Quote Parser.
"""

from typing import Optional


class ExtractionError(Exception):
    """Raised when no text can be obtained from a source document."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
