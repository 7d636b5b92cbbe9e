from __future__ import annotations

from typing import Callable, Dict, Iterable, Mapping, Optional, TypeVar

from ..core.constants import UNKNOWN_LABEL

T = TypeVar("T")


def index_by(items: Iterable[T], key: Callable[[T], str]) -> Dict[str, T]:
    return {key(i): i for i in items}


def resolve_label(
    items_by_id: Mapping[str, T],
    ref: Optional[str],
    label: Callable[[T], str],
    default: str = UNKNOWN_LABEL,
) -> str:
    """Resolve a loose reference to a display label, or `default` when dangling."""
    item = items_by_id.get(ref) if ref else None
    return label(item) if item is not None else default
