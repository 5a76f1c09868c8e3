import logging

import requests

from .constants import DISCORD_TIMEOUT_SECONDS
from .models import ComposedNotification

logger = logging.getLogger(__name__)


class SendError(Exception):
    pass


class DiscordWebhookSender:
    def __init__(self, timeout: float = DISCORD_TIMEOUT_SECONDS):
        self.timeout = timeout

    def send(self, notification: ComposedNotification):
        if not notification.channel:
            raise SendError(f"Webhook do Discord não configurado para {notification.category.value}")

        payload = notification.to_payload()
        try:
            resp = requests.post(notification.channel, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning(f"Falha de rede ao enviar {notification.category.value} para o Discord: {exc}")
            raise SendError(f"Falha ao contatar o Discord: {exc}") from exc

        if resp.status_code >= 400:
            logger.warning(f"Discord recusou {notification.category.value}: {resp.status_code} {resp.text[:200]}")
            raise SendError(f"Discord respondeu com status {resp.status_code}")

        logger.debug(f"Discord response: {resp.status_code} (menção={notification.includes_mention})")
        return resp
