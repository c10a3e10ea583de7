"""HTTP server binding and CORS configuration (env-resolved constants only)."""

from __future__ import annotations

from .env import get_int, get_str, get_list

HOST: str = get_str("HOST", "0.0.0.0")

PORT: int = get_int("PORT", 3001)
if PORT <= 0 or PORT > 65535:
    PORT = 3001

# Comma-separated allowlist; "*" admits every origin.
CORS_ORIGINS: tuple[str, ...] = get_list("CORS_ORIGIN", ("*",))

__all__ = ["CORS_ORIGINS", "HOST", "PORT"]
