from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class EventCategory(Enum):
    MOD_VERSION = "ModVersion"
    LAUNCHER_VERSION = "LauncherVersion"
    LOADER_VERSION = "LoaderVersion"


@dataclass(frozen=True)
class ModVersion:
    mod_title: str
    mod_description: str
    mod_banner_url: str
    mod_icon_url: str
    mod_url: str
    mod_author_name: str
    mod_author_url: str
    version: str
    changelog: str
    initial: bool


@dataclass(frozen=True)
class LauncherVersion:
    version: str
    changelog: str
    release_url: str


@dataclass(frozen=True)
class LoaderVersion:
    version: str
    changelog: str
    release_url: str
    source_url: str


ReleaseEvent = Union[ModVersion, LauncherVersion, LoaderVersion]


@dataclass(frozen=True)
class CategoryConfig:
    """Configuração estática de notificação de uma categoria."""
    webhook_url: Optional[str]
    name: str
    role_id: Optional[str] = None
    logo_url: Optional[str] = None
    # Apenas o launcher usa
    download_url: Optional[str] = None


@dataclass(frozen=True)
class ComposedNotification:
    """Mensagem pronta para envio.

    `includes_mention` é verdadeiro somente quando o content carrega a menção
    do cargo; nesse caso `role_id` indica qual cargo pode ser pingado.
    """
    category: EventCategory
    channel: Optional[str]
    embeds: List[Dict[str, Any]]
    content: Optional[str] = None
    includes_mention: bool = False
    role_id: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"embeds": self.embeds}
        if self.content is not None:
            payload["content"] = self.content
        if self.includes_mention and self.role_id:
            payload["allowed_mentions"] = {"roles": [self.role_id]}
        else:
            payload["allowed_mentions"] = {"parse": []}
        return payload
