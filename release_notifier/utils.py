import time
from urllib.parse import urlsplit


def is_well_formed_url(value: str) -> bool:
    """
    Aceita qualquer esquema, desde que exista esquema e host (ex.: ftp://x, https://y/z).

    URLs sem autoridade (mailto:, urn:, data:) ficam de fora: todos os campos
    de URL dos payloads apontam para uma página ou arquivo em algum host.
    """
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.hostname)


def truncate(text, limit):
    if text is None:
        return text
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def now_ms() -> int:
    return int(time.time() * 1000)
