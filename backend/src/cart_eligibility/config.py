"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import os
from pathlib import Path

# Load .env from backend root if present
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(key) or "").strip() or default


def _bool(key: str, default: bool = False) -> bool:
    raw = _str(key)
    if not raw:
        return default
    return raw.lower() in {"1", "true", "yes"}


# Logging
CART_ELIGIBILITY_LOG_LEVEL = _str("CART_ELIGIBILITY_LOG_LEVEL") or "WARNING"
CART_ELIGIBILITY_STDOUT_LOG = _bool("CART_ELIGIBILITY_STDOUT_LOG")
