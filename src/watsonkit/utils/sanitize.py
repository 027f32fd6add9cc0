from __future__ import annotations

from typing import Final

_CONTROL_CHARS: Final[frozenset[str]] = frozenset(
    chr(code) for code in range(0x00, 0x20) if chr(code) not in {"\t", "\n"}
)

_VISIBLE_SUFFIX: Final[int] = 4
_MAX_LOGGED_BODY: Final[int] = 200


def redact_secret(value: str | None) -> str:
    """Mask a credential, keeping only a short suffix for correlation."""

    if not value:
        return "<empty>"
    if len(value) <= _VISIBLE_SUFFIX * 2:
        return "*" * len(value)
    return f"***{value[-_VISIBLE_SUFFIX:]}"


def sanitize_log_message(value: str, limit: int = _MAX_LOGGED_BODY) -> str:
    """Normalise remote text for logging: strip control characters, truncate."""

    normalised = value.replace("\r\n", "\n").replace("\r", "\n")
    cleaned = "".join(ch for ch in normalised if ch not in _CONTROL_CHARS)
    if len(cleaned) <= limit:
        return cleaned
    return f"{cleaned[: limit - 3]}..."


__all__ = ["redact_secret", "sanitize_log_message"]
