from typing import Any, Dict, Optional
from urllib.parse import urlsplit

from .models import (
    CategoryConfig,
    ComposedNotification,
    EventCategory,
    LauncherVersion,
    LoaderVersion,
    ModVersion,
    ReleaseEvent,
)
from .utils import truncate

# Limites do Discord para embeds
DESCRIPTION_LIMIT = 4096
FIELD_VALUE_LIMIT = 1024
TITLE_LIMIT = 256
AUTHOR_NAME_LIMIT = 256
EMBED_TOTAL_LIMIT = 6000

CHANGELOG_FIELD = "📝 Changelog"

EMBED_COLORS = {
    EventCategory.MOD_VERSION: 3447003,
    EventCategory.LAUNCHER_VERSION: 15844367,
    EventCategory.LOADER_VERSION: 10181046,
}


def role_mention(role_id: str) -> str:
    return f"<@&{role_id}>"


def embed_link(url: Optional[str]) -> Optional[str]:
    """O Discord só aceita http(s) em url/thumbnail/image do embed."""
    if url and urlsplit(url).scheme.lower() in ("http", "https"):
        return url
    return None


def embed_length(embed: Dict[str, Any]) -> int:
    # Mesma contagem que o Discord usa para o limite total
    total = len(embed.get("title", "")) + len(embed.get("description", ""))
    total += len(embed.get("author", {}).get("name", ""))
    total += len(embed.get("footer", {}).get("text", ""))
    for field in embed.get("fields", []):
        total += len(field["name"]) + len(field["value"])
    return total


def _shrink(text: str, by: int) -> str:
    keep = len(text) - by
    if keep <= 3:
        return "..."
    return truncate(text, keep)


def fit_embed(embed: Dict[str, Any]) -> Dict[str, Any]:
    """Corta primeiro a descrição e depois o changelog até caber em EMBED_TOTAL_LIMIT."""
    overflow = embed_length(embed) - EMBED_TOTAL_LIMIT
    if overflow > 0 and embed.get("description"):
        embed["description"] = _shrink(embed["description"], overflow)
        overflow = embed_length(embed) - EMBED_TOTAL_LIMIT
    if overflow > 0:
        for field in embed["fields"]:
            if field["name"] == CHANGELOG_FIELD:
                field["value"] = _shrink(field["value"], overflow)
    return embed


def _field(name, value, inline=False):
    return {"name": name, "value": truncate(value, FIELD_VALUE_LIMIT), "inline": inline}


def _code(value: str) -> str:
    return f"`{truncate(value, FIELD_VALUE_LIMIT - 2)}`"


def _masked_link(text: str, url: str) -> str:
    if embed_link(url) and len(url) + 8 <= FIELD_VALUE_LIMIT:
        return f"[{truncate(text, FIELD_VALUE_LIMIT - len(url) - 4)}]({url})"
    # Link mascarado só funciona com http(s): nome e URL em linhas separadas
    name = truncate(text, AUTHOR_NAME_LIMIT)
    return f"{name}\n{truncate(url, FIELD_VALUE_LIMIT - len(name) - 1)}"


def _base_embed(category: EventCategory, config: CategoryConfig, title: str, url: Optional[str]) -> Dict[str, Any]:
    embed: Dict[str, Any] = {
        "title": truncate(title, TITLE_LIMIT),
        "color": EMBED_COLORS[category],
        "author": {"name": truncate(config.name, AUTHOR_NAME_LIMIT)},
        "fields": [],
    }
    if embed_link(url):
        embed["url"] = url
    if embed_link(config.logo_url):
        embed["author"]["icon_url"] = config.logo_url
    return embed


def format_mod_version(config: CategoryConfig, event: ModVersion) -> Dict[str, Any]:
    embed = _base_embed(EventCategory.MOD_VERSION, config, event.mod_title, event.mod_url)
    heading = "🆕 **Novo mod lançado!**" if event.initial else "🔄 **Nova versão disponível!**"
    embed["description"] = truncate(f"{heading}\n\n{event.mod_description}", DESCRIPTION_LIMIT)
    if embed_link(event.mod_icon_url):
        embed["thumbnail"] = {"url": event.mod_icon_url}
    if embed_link(event.mod_banner_url):
        embed["image"] = {"url": event.mod_banner_url}
    embed["fields"].extend([
        _field("📦 Versão", _code(event.version), inline=True),
        _field("👤 Autor", _masked_link(event.mod_author_name, event.mod_author_url), inline=True),
        _field(CHANGELOG_FIELD, event.changelog),
    ])

    # URLs que não cabem nos slots do embed aparecem como texto
    text_links = [
        f"{label}: {url}"
        for label, url in (("Página", event.mod_url), ("Ícone", event.mod_icon_url), ("Banner", event.mod_banner_url))
        if not embed_link(url)
    ]
    if text_links:
        embed["fields"].append(_field("🔗 Links", "\n".join(text_links)))
    return fit_embed(embed)


def format_launcher_version(config: CategoryConfig, event: LauncherVersion) -> Dict[str, Any]:
    url = embed_link(config.download_url) or event.release_url
    embed = _base_embed(EventCategory.LAUNCHER_VERSION, config, f"{config.name} {event.version}", url)
    embed["description"] = "🚀 **Nova versão do launcher disponível!**"
    if embed_link(config.logo_url):
        embed["thumbnail"] = {"url": config.logo_url}
    embed["fields"].extend([
        _field("📦 Versão", _code(event.version), inline=True),
        _field(CHANGELOG_FIELD, event.changelog),
    ])
    if config.download_url:
        embed["fields"].append(_field("⬇️ Download", config.download_url, inline=True))
    embed["fields"].append(_field("🔗 Release", event.release_url, inline=True))
    return fit_embed(embed)


def format_loader_version(config: CategoryConfig, event: LoaderVersion) -> Dict[str, Any]:
    embed = _base_embed(EventCategory.LOADER_VERSION, config, f"{config.name} {event.version}", event.release_url)
    embed["description"] = "🧩 **Nova versão do mod loader disponível!**"
    if embed_link(config.logo_url):
        embed["thumbnail"] = {"url": config.logo_url}
    embed["fields"].extend([
        _field("📦 Versão", _code(event.version), inline=True),
        _field(CHANGELOG_FIELD, event.changelog),
        _field("🔗 Release", event.release_url, inline=True),
        _field("💻 Código-fonte", event.source_url, inline=True),
    ])
    return fit_embed(embed)


EMBED_FORMATTERS = {
    EventCategory.MOD_VERSION: format_mod_version,
    EventCategory.LAUNCHER_VERSION: format_launcher_version,
    EventCategory.LOADER_VERSION: format_loader_version,
}


def compose(category: EventCategory, config: CategoryConfig, event: ReleaseEvent, ping: bool) -> ComposedNotification:
    """
    Monta a notificação de uma release. Função pura: mesma entrada, mesma saída.

    A menção ao cargo só entra quando a categoria tem `role_id` configurado
    e `ping` é verdadeiro. Caso contrário não há `content` algum.
    """
    embed = EMBED_FORMATTERS[category](config, event)
    includes_mention = bool(config.role_id) and ping
    return ComposedNotification(
        category=category,
        channel=config.webhook_url,
        embeds=[embed],
        content=role_mention(config.role_id) if includes_mention else None,
        includes_mention=includes_mention,
        role_id=config.role_id if includes_mention else None,
    )
