"""
Pocket Coffer vault core - local SQLite store for passwords, calendar events,
documents and settings, plus the named commands a host shell invokes.
"""

# Package initialization
from .core.config import VERSION
from .core.dao import Store
from .core.exceptions import VaultError, StartupError, ConflictError, QueryError
from .core.schema import PasswordEntry, CalendarEvent, Document
from .api.commands import Commands, CommandError

__version__ = VERSION

__all__ = [
    'Store',
    'Commands',
    'CommandError',
    'VaultError',
    'StartupError',
    'ConflictError',
    'QueryError',
    'PasswordEntry',
    'CalendarEvent',
    'Document',
]
