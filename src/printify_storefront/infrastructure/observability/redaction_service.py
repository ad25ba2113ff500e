"""Masks Printify credentials before request data reaches the logs.

Covers the personal access token sent as a bearer credential, the
``X-Pfy-Signature`` header on webhook deliveries and tokens passed in
query strings.
"""

import re
from collections.abc import Mapping
from typing import Any

REDACTED = "[REDACTED]"

_VALUE = r"[^\s,;'\"&]+"

# Order matters: the scheme-aware bearer rule runs before the generic header rule.
_TEXT_RULES: tuple[re.Pattern[str], ...] = (
    re.compile(rf"(\bbearer\s+){_VALUE}", re.IGNORECASE),
    re.compile(rf"(\bauthorization\s*[:=]\s*(?!bearer\b)(?:[a-z]+\s+)?){_VALUE}", re.IGNORECASE),
    re.compile(rf"(\bx-pfy-signature\s*[:=]\s*){_VALUE}", re.IGNORECASE),
    re.compile(rf"([?&](?:api_key|access_token|token)=){_VALUE}", re.IGNORECASE),
)

_SENSITIVE_KEY_PARTS = (
    "authorization",
    "signature",
    "api_key",
    "apikey",
    "access_token",
    "token",
    "secret",
    "password",
)


def is_sensitive_key(key: Any) -> bool:
    normalised = str(key).lower().replace("-", "_")
    return any(part in normalised for part in _SENSITIVE_KEY_PARTS)


def redact_text(text: str) -> str:
    if not text:
        return text
    for rule in _TEXT_RULES:
        text = rule.sub(lambda match: match.group(1) + REDACTED, text)
    return text


def redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, Mapping):
        return redact_dict(value)
    if isinstance(value, (list, tuple)):
        return [redact_value(item) for item in value]
    return value


def redact_dict(obj: Mapping[str, Any]) -> dict[str, Any]:
    """
    Returns a masked copy of a webhook body or header mapping. Keys are
    matched case-insensitively, with dashes and underscores treated alike.
    """
    return {key: REDACTED if is_sensitive_key(key) else redact_value(value) for key, value in obj.items()}
