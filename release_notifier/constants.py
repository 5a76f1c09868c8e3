import os
from typing import Dict, Optional

from .models import CategoryConfig, EventCategory


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    # String vazia conta como não configurada
    value = os.getenv(name, "").strip()
    return value or default


# Configurações globais de ambiente
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Cooldown do ping de cargo (único para todas as categorias)
PING_COOLDOWN_MS = int(os.getenv("PING_COOLDOWN_MS", "3600000"))  # 60 minutos por padrão

DISCORD_TIMEOUT_SECONDS = float(os.getenv("DISCORD_TIMEOUT_SECONDS", "10"))

# Prefixo das variáveis de ambiente e nome exibido por categoria
CATEGORY_ENV = {
    EventCategory.MOD_VERSION: ("MOD_VERSION", "Mods"),
    EventCategory.LAUNCHER_VERSION: ("LAUNCHER_VERSION", "Launcher"),
    EventCategory.LOADER_VERSION: ("LOADER_VERSION", "Mod Loader"),
}


def load_category_configs() -> Dict[EventCategory, CategoryConfig]:
    configs = {}
    for category, (prefix, default_name) in CATEGORY_ENV.items():
        download_url = None
        if category is EventCategory.LAUNCHER_VERSION:
            download_url = _env(f"{prefix}_DOWNLOAD_URL")
        configs[category] = CategoryConfig(
            webhook_url=_env(f"{prefix}_WEBHOOK_URL"),
            role_id=_env(f"{prefix}_ROLE_ID"),
            name=_env(f"{prefix}_NAME", default_name),
            logo_url=_env(f"{prefix}_LOGO_URL"),
            download_url=download_url,
        )
    return configs
