"""
Degrading reads.

Dashboard pages prefer a partial view over an error page: a failed store read
is logged and treated as an empty result so the remaining data still renders.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def read_or_empty(description: str, read: Callable[..., List[T]], *args: Any) -> List[T]:
    """Call `read(*args)`; on RuntimeError log it and return an empty list."""

    try:
        return read(*args)
    except RuntimeError as e:
        logger.error(
            f"Error fetching {description}: {e}",
            extra={"read": description, "error": str(e)},
        )
        return []


__all__ = ["read_or_empty"]
