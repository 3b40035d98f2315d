"""
DomainError - Common base for every error raised by the core.
Lets a transport layer catch the whole family in one place.
"""


class DomainError(Exception):
    """Base class for domain and application errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
