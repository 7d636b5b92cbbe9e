from __future__ import annotations

import uuid
from typing import Container

from .datetime_utils import now_millis


def new_id(prefix: str, taken: Container[str] = ()) -> str:
    """Generate `<prefix>-<millis>-<suffix>`, unique within `taken`."""
    while True:
        candidate = f"{prefix}-{now_millis()}-{uuid.uuid4().hex[:9]}"
        if candidate not in taken:
            return candidate
