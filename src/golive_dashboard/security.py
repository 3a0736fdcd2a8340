"""Log redaction for the Rocketlane api-key and base URL checks."""

from __future__ import annotations

import ipaddress
import re
from typing import Iterable
from urllib.parse import urlsplit, urlunsplit

REDACTED = "***"

# `api-key: x`, `"api-key": "x"`, `api-key=x`, `Authorization: Bearer x`
_KEYED_SECRET = re.compile(
    r"(?i)(?P<key>\b(?:x-)?api[-_]?key['\"]?|\bauthorization['\"]?)(?P<sep>\s*[:=]\s*['\"]?)"
    r"(?P<value>(?:bearer\s+)?[^\s'\",;&}]+)"
)

_BLOCKED_HOSTNAMES = frozenset({"localhost", "localhost.localdomain"})


def safe_log_text(text: str, *, secrets: Iterable[str] = ()) -> str:
    """
    Redact api-key / authorization values from `text`.

    Any literal in `secrets` is also replaced wherever it appears, so an
    echoed key is hidden even when it is not written as `key: value`.
    """
    out = _KEYED_SECRET.sub(lambda m: f"{m.group('key')}{m.group('sep')}{REDACTED}", text or "")
    for secret in secrets:
        secret = str(secret or "").strip()
        if secret:
            out = out.replace(secret, REDACTED)
    return out


def _is_public_host(host: str) -> bool:
    name = (host or "").strip().lower().rstrip(".")
    if not name or name in _BLOCKED_HOSTNAMES or name.endswith(".local"):
        return False
    try:
        ip = ipaddress.ip_address(name)
    except ValueError:
        return True
    return ip.is_global


def normalize_api_base_url(raw_url: str, *, service_name: str) -> str:
    """
    Return `raw_url` without query, fragment or trailing slash.

    Raises ValueError for non-https URLs, embedded credentials and hosts
    that are not publicly routable.
    """
    value = (raw_url or "").strip()
    if not value:
        raise ValueError(f"Configure the {service_name} base URL.")

    parts = urlsplit(value)
    if parts.scheme.lower() != "https" or not parts.netloc:
        raise ValueError(f"{service_name}: base URL must be an https:// URL.")
    if parts.username or parts.password:
        raise ValueError(f"{service_name}: remove credentials from the base URL.")
    if not _is_public_host(parts.hostname or ""):
        raise ValueError(f"{service_name}: base URL host must be public.")

    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", "")).rstrip("/")
