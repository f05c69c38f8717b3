"""
Parsing of the JSON `items` column shared by selections and submissions.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from domain.payments import SelectionItem, to_decimal


def _quantity(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_selection_items(raw_items: Optional[Iterable[Any]]) -> List[SelectionItem]:
    """Selection items from stored JSON; entries that are not objects are ignored."""

    items: List[SelectionItem] = []
    for raw in raw_items or []:
        if not isinstance(raw, dict):
            continue
        items.append(
            SelectionItem(
                name=str(raw.get("name") or ""),
                quantity=_quantity(raw.get("quantity")),
                unit_price=to_decimal(raw.get("price")),
            )
        )
    return items


__all__ = ["parse_selection_items"]
