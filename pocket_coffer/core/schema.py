"""
Record types stored in the vault.
Timestamps are caller-supplied strings and are never parsed here.
"""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass
class PasswordEntry:
    id: str
    title: str
    username: str
    password: str
    website: Optional[str]
    notes: Optional[str]
    created_at: str
    updated_at: str


@dataclass
class CalendarEvent:
    id: str
    title: str
    description: Optional[str]
    start_date: str
    end_date: str
    location: Optional[str]
    color: str
    created_at: str
    updated_at: str


@dataclass
class Document:
    id: str
    title: str
    content: str
    created_at: str
    updated_at: str


def column_names(record_type) -> tuple:
    """Column order for a record type, matching the table definition."""
    return tuple(f.name for f in fields(record_type))