"""Data context exceptions.

Only configuration problems and misuse of a disposed context are raised
from here. Connectivity, schema and query errors come from SQLAlchemy or
the database driver and propagate unchanged.
"""


class DataContextError(Exception):
    """Base exception for data context errors."""

    def __init__(self, message: str = "Data context error"):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(DataContextError):
    """Raised when context options are missing or malformed."""

    def __init__(self, message: str = "Invalid database context options"):
        super().__init__(message)


class ContextDisposedError(DataContextError):
    """Raised when a disposed context is used to persist changes."""

    def __init__(self, message: str = "The database context has been disposed"):
        super().__init__(message)
