"""Pipeline de despacho: valida -> decide ping -> compõe -> envia.

Não registra logs nem faz retry: o resultado (aceito ou rejeitado com o tipo
de falha) volta para quem chamou. O cooldown só é registrado depois que uma
notificação com menção foi entregue.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .cooldown import CooldownTracker
from .formatters import compose
from .models import CategoryConfig, ComposedNotification, EventCategory
from .services import SendError
from .utils import now_ms
from .validation import ValidationError, validate

ACCEPTED = "accepted"
REJECTED = "rejected"

VALIDATION_FAILURE = "ValidationError"
DOWNSTREAM_FAILURE = "DownstreamError"


@dataclass(frozen=True)
class DispatchResult:
    status: str
    kind: Optional[str] = None
    message: Optional[str] = None
    field: Optional[str] = None
    notification: Optional[ComposedNotification] = None

    @property
    def accepted(self) -> bool:
        return self.status == ACCEPTED

    def to_dict(self) -> Dict[str, Any]:
        if self.accepted:
            return {"status": ACCEPTED}
        data = {"status": REJECTED, "kind": self.kind, "message": self.message}
        if self.field is not None:
            data["field"] = self.field
        return data


class DispatchPipeline:
    def __init__(self, configs: Dict[EventCategory, CategoryConfig], sender,
                 tracker: Optional[CooldownTracker] = None, clock: Callable[[], int] = now_ms):
        self.configs = configs
        self.sender = sender
        self.tracker = tracker if tracker is not None else CooldownTracker()
        self.clock = clock

    def handle(self, category: EventCategory, payload: Any) -> DispatchResult:
        try:
            event = validate(category, payload)
        except ValidationError as exc:
            return DispatchResult(REJECTED, VALIDATION_FAILURE, exc.message, field=exc.field)

        config = self.configs[category]
        # Decidir/enviar/registrar é serializado por categoria para que dois
        # releases simultâneos não passem ambos pelo cooldown
        with self.tracker.lock(category):
            ping = self.tracker.should_ping(category, self.clock())
            notification = compose(category, config, event, ping)
            try:
                self.sender.send(notification)
            except SendError as exc:
                return DispatchResult(REJECTED, DOWNSTREAM_FAILURE, str(exc), notification=notification)
            if notification.includes_mention:
                self.tracker.record_ping(category, self.clock())

        return DispatchResult(ACCEPTED, notification=notification)

    def receive(self, category: EventCategory, payload: Any) -> Dict[str, Any]:
        return self.handle(category, payload).to_dict()
