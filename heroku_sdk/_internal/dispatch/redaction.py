"""Redaction of sensitive request fields for debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "authorization",
    "password",
    "new_password",
    "private_key",
    "certificate_chain",
    "secret",
    "token",
    "access_token",
    "refresh_token",
    "code",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: dict[str, Any] | list[Any]) -> Any:
    """Recursively redact sensitive keys from a request body.

    Creates a deep copy - the original payload is never mutated. Only used
    for debug logging; bodies sent on the wire are never redacted.

    Args:
        payload: The object or array to redact sensitive values from.

    Returns:
        A new object or array with sensitive values replaced by "[REDACTED]".
    """
    return _redact_recursive(payload)


def _redact_recursive(obj: Any) -> Any:
    """Recursively redact sensitive keys."""
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = _redact_recursive(value)
        return result
    elif isinstance(obj, list):
        return [_redact_recursive(item) for item in obj]
    else:
        return obj
