"""Exceptions raised by the statement builder."""

from typing import Dict, Optional

from .translate import translate


class StatementError(ValueError):
    """Base error; its message is rendered through the translation hook."""
    key = 'exception.InvalidParam'

    def __init__(self, field: str, locale: Optional[str] = None):
        self.field = field
        self.params: Dict[str, str] = {'::params::': field}
        super().__init__(self.message(locale))

    def message(self, locale: Optional[str] = None) -> str:
        """Render the message for a locale."""
        return translate(self.key, locale, self.params)


class InvalidConstruction(StatementError):
    """Raised when a builder is created with an empty database or table name."""
    key = 'exception.NotEmptyParam'


class MissingArgument(StatementError):
    """Raised when a fragment an operation requires is empty."""
    key = 'exception.NotEmptyParam'
