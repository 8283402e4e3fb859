"""Small shared helpers for tokens and timestamps."""

from __future__ import annotations

import base64
import secrets
from datetime import datetime, timezone


def random_secure_token(num_bytes: int = 32) -> str:
    """Return ``num_bytes`` of cryptographically secure randomness, base64 encoded."""

    return base64.b64encode(secrets.token_bytes(num_bytes)).decode("ascii")


def utc_now_datetime(now: datetime | None = None) -> str:
    """Format a UTC timestamp as ``YYYY-MM-DD HH:MM:SS.mmmZ``."""

    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
