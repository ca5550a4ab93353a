"""
Shared fixtures - every test gets its own vault directory under tmp_path.
"""

import pytest

from pocket_coffer.api.commands import Commands
from pocket_coffer.core.dao import Store
from pocket_coffer.core.schema import CalendarEvent, Document, PasswordEntry


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "vault"


@pytest.fixture
def store(data_dir):
    vault = Store(data_dir=data_dir)
    yield vault
    vault.close()


@pytest.fixture
def commands(store):
    return Commands(store)


def make_password(id="p1", updated_at="2024-01-01T00:00:00Z", **overrides):
    values = dict(
        id=id,
        title="Mail",
        username="a@b.com",
        password="x",
        website=None,
        notes=None,
        created_at="2024-01-01T00:00:00Z",
        updated_at=updated_at,
    )
    values.update(overrides)
    return PasswordEntry(**values)


def make_event(id="e1", start_date="2024-03-01T09:00:00Z", end_date="2024-03-01T10:00:00Z", **overrides):
    values = dict(
        id=id,
        title="Standup",
        description=None,
        start_date=start_date,
        end_date=end_date,
        location=None,
        color="#3b82f6",
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-01T00:00:00Z",
    )
    values.update(overrides)
    return CalendarEvent(**values)


def make_document(id="d1", updated_at="2024-01-01T00:00:00Z", **overrides):
    values = dict(
        id=id,
        title="Notes",
        content="# Heading\n\nbody",
        created_at="2024-01-01T00:00:00Z",
        updated_at=updated_at,
    )
    values.update(overrides)
    return Document(**values)
