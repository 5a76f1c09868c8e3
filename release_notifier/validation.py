"""Validação dos payloads de release recebidos pelos webhooks.

Cada categoria tem um schema: uma lista ordenada de (campo do payload,
atributo do evento, checagem). Os campos são verificados na ordem declarada
e a primeira violação encontrada é reportada, então a mesma entrada sempre
produz o mesmo erro. Campos desconhecidos são descartados.
"""
from typing import Any, Callable, Dict, List, Optional, Tuple

from .models import EventCategory, LauncherVersion, LoaderVersion, ModVersion, ReleaseEvent
from .utils import is_well_formed_url

MISSING = "missing"
WRONG_TYPE = "type"
EMPTY = "empty"
MALFORMED_URL = "url"
NOT_OBJECT = "not_object"


class ValidationError(Exception):
    def __init__(self, field: Optional[str], reason: str, message: str):
        super().__init__(message)
        self.field = field
        self.reason = reason
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "reason": self.reason, "message": self.message}


Check = Callable[[str, Any], None]


def required_string(field: str, value: Any) -> None:
    if not isinstance(value, str):
        raise ValidationError(field, WRONG_TYPE, f"{field} must be a string")
    if value == "":
        raise ValidationError(field, EMPTY, f"{field} must not be empty")


def required_url(field: str, value: Any) -> None:
    required_string(field, value)
    if not is_well_formed_url(value):
        raise ValidationError(field, MALFORMED_URL, f"{field} must be a valid URL")


def required_boolean(field: str, value: Any) -> None:
    # bool é subclasse de int, mas 0/1 não são aceitos como booleano
    if not isinstance(value, bool):
        raise ValidationError(field, WRONG_TYPE, f"{field} must be a boolean")


Schema = List[Tuple[str, str, Check]]

MOD_VERSION_SCHEMA: Schema = [
    ("modTitle", "mod_title", required_string),
    ("modDescription", "mod_description", required_string),
    ("modBannerUrl", "mod_banner_url", required_url),
    ("modIconUrl", "mod_icon_url", required_url),
    ("modUrl", "mod_url", required_url),
    ("modAuthorName", "mod_author_name", required_string),
    ("modAuthorUrl", "mod_author_url", required_url),
    ("version", "version", required_string),
    ("changelog", "changelog", required_string),
    ("initial", "initial", required_boolean),
]

LAUNCHER_VERSION_SCHEMA: Schema = [
    ("version", "version", required_string),
    ("changelog", "changelog", required_string),
    ("releaseUrl", "release_url", required_url),
]

LOADER_VERSION_SCHEMA: Schema = [
    ("version", "version", required_string),
    ("changelog", "changelog", required_string),
    ("releaseUrl", "release_url", required_url),
    ("sourceUrl", "source_url", required_url),
]

SCHEMAS = {
    EventCategory.MOD_VERSION: (MOD_VERSION_SCHEMA, ModVersion),
    EventCategory.LAUNCHER_VERSION: (LAUNCHER_VERSION_SCHEMA, LauncherVersion),
    EventCategory.LOADER_VERSION: (LOADER_VERSION_SCHEMA, LoaderVersion),
}


def apply_schema(schema: Schema, payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError(None, NOT_OBJECT, "payload must be a JSON object")
    values = {}
    for field, attribute, check in schema:
        if field not in payload or payload[field] is None:
            raise ValidationError(field, MISSING, f"{field} is a required field")
        check(field, payload[field])
        values[attribute] = payload[field]
    return values


def validate(category: EventCategory, payload: Any) -> ReleaseEvent:
    """
    Valida um payload bruto para a categoria informada.

    Returns:
        o evento tipado (ModVersion, LauncherVersion ou LoaderVersion).
    Raises:
        ValidationError: na primeira restrição violada.
    """
    schema, event_type = SCHEMAS[category]
    return event_type(**apply_schema(schema, payload))


def validate_mod_version(payload: Any) -> ModVersion:
    return validate(EventCategory.MOD_VERSION, payload)


def validate_launcher_version(payload: Any) -> LauncherVersion:
    return validate(EventCategory.LAUNCHER_VERSION, payload)


def validate_loader_version(payload: Any) -> LoaderVersion:
    return validate(EventCategory.LOADER_VERSION, payload)
