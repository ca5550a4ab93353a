"""
Payload and response models for the host command surface.
These check shape only; timestamps stay opaque strings.
"""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class PasswordEntryModel(BaseModel):
    id: str
    title: str
    username: str
    password: str
    website: Optional[str] = None
    notes: Optional[str] = None
    created_at: str
    updated_at: str


class CalendarEventModel(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    start_date: str
    end_date: str
    location: Optional[str] = None
    color: str
    created_at: str
    updated_at: str


class DocumentModel(BaseModel):
    id: str
    title: str
    content: str
    created_at: str
    updated_at: str


class PasswordRequest(BaseModel):
    entry: PasswordEntryModel


class EventRequest(BaseModel):
    event: CalendarEventModel


class DocumentRequest(BaseModel):
    doc: DocumentModel


class IdRequest(BaseModel):
    id: str


class SettingKeyRequest(BaseModel):
    key: str


class SettingSetRequest(SettingKeyRequest):
    value: str


class SearchPasswordsRequest(BaseModel):
    term: str = ""


class EventRangeRequest(BaseModel):
    start: str
    end: str


class GeneratePasswordRequest(BaseModel):
    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False
    exclude_ambiguous: bool = False


class PasswordStrengthRequest(BaseModel):
    password: str


class InvokeResponse(BaseModel):
    result: Any = None


class HealthResponse(BaseModel):
    status: str
    version: str
    db_health: bool
    counts: Dict[str, int]


class CommandListResponse(BaseModel):
    commands: List[str]
