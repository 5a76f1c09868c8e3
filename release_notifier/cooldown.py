import threading
from typing import Dict, Optional

from .constants import PING_COOLDOWN_MS
from .models import EventCategory


class CooldownTracker:
    """
    Guarda, por categoria, o timestamp (ms) do último ping de cargo enviado.

    Um único slot por categoria: `record_ping` sobrescreve o valor anterior.
    Categorias não interferem entre si. O lock de cada categoria serializa
    a sequência decidir -> enviar -> registrar no pipeline.
    """

    def __init__(self, cooldown_ms: int = PING_COOLDOWN_MS):
        self.cooldown_ms = cooldown_ms
        self._last_ping: Dict[EventCategory, int] = {}
        self._locks: Dict[EventCategory, threading.Lock] = {
            category: threading.Lock() for category in EventCategory
        }

    def lock(self, category: EventCategory) -> threading.Lock:
        return self._locks[category]

    def last_ping(self, category: EventCategory) -> Optional[int]:
        return self._last_ping.get(category)

    def should_ping(self, category: EventCategory, now: int) -> bool:
        ts = self._last_ping.get(category)
        if ts is None:
            return True
        return (now - ts) >= self.cooldown_ms

    def record_ping(self, category: EventCategory, now: int) -> None:
        # Só deve ser chamado quando o ping foi de fato entregue
        self._last_ping[category] = now
