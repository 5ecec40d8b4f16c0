"""HTTP Basic credentials for the manager."""

from __future__ import annotations

import base64
from typing import Optional


def to_authorization(username: str, password: Optional[str] = None) -> str:
    credentials = f"{username}:{password or ''}"
    token = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
    return f"Basic {token}"
