"""
Named commands exposed to the host shell.

Each command parses its payload, makes one call into the Store and returns
plain data. Every failure leaves this module as a CommandError whose message
is the only thing the host gets to see.
"""

from dataclasses import asdict
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from .schemas import (
    PasswordRequest,
    EventRequest,
    DocumentRequest,
    IdRequest,
    SettingKeyRequest,
    SettingSetRequest,
    SearchPasswordsRequest,
    EventRangeRequest,
    GeneratePasswordRequest,
    PasswordStrengthRequest,
)
from ..core.config import VERSION
from ..core.dao import Store
from ..core.exceptions import VaultError
from ..core.generator import GeneratorConfig, evaluate_strength, generate_password
from ..core.schema import CalendarEvent, Document, PasswordEntry
from ..core.sysinfo import get_system_info
from ..util.logging import logger


class CommandError(Exception):
    """The single error channel seen by the host: a non-empty message."""

    def __init__(self, message: str):
        super().__init__(message or "command failed")


class UnknownCommandError(CommandError):
    pass


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item.get("loc", ()))
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "invalid payload: " + "; ".join(parts)


class Commands:
    """Command handlers bound to one explicitly supplied Store."""

    def __init__(self, store: Store):
        self.store = store
        self._registry: Dict[str, Tuple[Optional[Type[BaseModel]], Callable]] = {
            "list_passwords": (None, self.list_passwords),
            "add_password": (PasswordRequest, self.add_password),
            "update_password": (PasswordRequest, self.update_password),
            "delete_password": (IdRequest, self.delete_password),
            "search_passwords": (SearchPasswordsRequest, self.search_passwords),
            "list_events": (None, self.list_events),
            "add_event": (EventRequest, self.add_event),
            "update_event": (EventRequest, self.update_event),
            "delete_event": (IdRequest, self.delete_event),
            "list_events_between": (EventRangeRequest, self.list_events_between),
            "list_documents": (None, self.list_documents),
            "get_all_documents": (None, self.list_documents),
            "add_document": (DocumentRequest, self.add_document),
            "update_document": (DocumentRequest, self.update_document),
            "delete_document": (IdRequest, self.delete_document),
            "get_setting": (SettingKeyRequest, self.get_setting),
            "set_setting": (SettingSetRequest, self.set_setting),
            "get_system_info": (None, self.get_system_info),
            "generate_password": (GeneratePasswordRequest, self.generate_password),
            "evaluate_password_strength": (PasswordStrengthRequest, self.evaluate_password_strength),
            "health": (None, self.health),
        }

    @property
    def names(self) -> List[str]:
        return sorted(self._registry)

    def has(self, name: str) -> bool:
        return name in self._registry

    def invoke(self, name: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        """Run the named command with a JSON-style payload."""
        if name not in self._registry:
            logger.log_command(name, "failed", error="unknown command")
            raise UnknownCommandError(f"unknown command: {name}")

        request_model, handler = self._registry[name]
        try:
            if request_model is None:
                result = handler()
            else:
                request = request_model.model_validate(payload if payload is not None else {})
                result = handler(request)
        except ValidationError as e:
            message = _format_validation_error(e)
            logger.log_command(name, "failed", payload, error=message)
            raise CommandError(message) from e
        except (VaultError, ValueError) as e:
            logger.log_command(name, "failed", payload, error=str(e))
            raise CommandError(str(e)) from e

        logger.log_command(name, "success", payload)
        return result

    # Passwords

    def list_passwords(self) -> List[Dict[str, Any]]:
        return [asdict(entry) for entry in self.store.passwords.list()]

    def add_password(self, request: PasswordRequest) -> None:
        self.store.passwords.add(PasswordEntry(**request.entry.model_dump()))

    def update_password(self, request: PasswordRequest) -> None:
        self.store.passwords.update(PasswordEntry(**request.entry.model_dump()))

    def delete_password(self, request: IdRequest) -> None:
        self.store.passwords.delete(request.id)

    def search_passwords(self, request: SearchPasswordsRequest) -> List[Dict[str, Any]]:
        return [asdict(entry) for entry in self.store.passwords.search(request.term)]

    # Calendar events

    def list_events(self) -> List[Dict[str, Any]]:
        return [asdict(event) for event in self.store.events.list()]

    def add_event(self, request: EventRequest) -> None:
        self.store.events.add(CalendarEvent(**request.event.model_dump()))

    def update_event(self, request: EventRequest) -> None:
        self.store.events.update(CalendarEvent(**request.event.model_dump()))

    def delete_event(self, request: IdRequest) -> None:
        self.store.events.delete(request.id)

    def list_events_between(self, request: EventRangeRequest) -> List[Dict[str, Any]]:
        return [asdict(event) for event in self.store.events.between(request.start, request.end)]

    # Documents

    def list_documents(self) -> List[Dict[str, Any]]:
        return [asdict(doc) for doc in self.store.documents.list()]

    def add_document(self, request: DocumentRequest) -> None:
        self.store.documents.add(Document(**request.doc.model_dump()))

    def update_document(self, request: DocumentRequest) -> None:
        self.store.documents.update(Document(**request.doc.model_dump()))

    def delete_document(self, request: IdRequest) -> None:
        self.store.documents.delete(request.id)

    # Settings

    def get_setting(self, request: SettingKeyRequest) -> Optional[str]:
        return self.store.settings.get(request.key)

    def set_setting(self, request: SettingSetRequest) -> None:
        self.store.settings.set(request.key, request.value)

    # Stateless tools

    def get_system_info(self) -> Dict[str, Any]:
        return get_system_info().to_dict()

    def generate_password(self, request: GeneratePasswordRequest) -> Dict[str, Any]:
        password = generate_password(GeneratorConfig(**request.model_dump()))
        return {"password": password, "strength": evaluate_strength(password).to_dict()}

    def evaluate_password_strength(self, request: PasswordStrengthRequest) -> Dict[str, Any]:
        return evaluate_strength(request.password).to_dict()

    def health(self) -> Dict[str, Any]:
        db_health = self.store.health_check()
        try:
            counts = self.store.counts() if db_health else {}
        except VaultError:
            db_health, counts = False, {}
        return {
            "status": "healthy" if db_health else "unhealthy",
            "version": VERSION,
            "db_health": db_health,
            "counts": counts,
        }
