from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class StoredSession:
    sid: str
    data: Dict[str, Any]
    expires_at: datetime
