"""Quantity expansion and ordering of items to pack."""

from __future__ import annotations

from typing import Iterable

from box_packer.models import Item, UnitItem


def expand_items(items: Iterable[Item]) -> list[UnitItem]:
    """One UnitItem per requested unit. quantity=0 contributes nothing."""
    units: list[UnitItem] = []
    for item in items:
        for _ in range(item.quantity):
            units.append(UnitItem(id=item.id, w=item.w, h=item.h, d=item.d))
    return units


def sort_items_by_volume(units: Iterable[UnitItem]) -> list[UnitItem]:
    """
    Big items first: descending volume, then descending largest dimension.

    sorted() is stable, so remaining ties keep expansion order
    (input item order, then unit index).
    """
    return sorted(units, key=lambda u: (-u.volume, -u.max_dim))


def aggregate_unpacked(units: Iterable[UnitItem]) -> list[Item]:
    """
    Regroup unpacked units by source item id.

    Output order follows the first unit seen for each id; quantity counts
    the unpacked units only.
    """
    counts: dict[str, int] = {}
    first: dict[str, UnitItem] = {}
    for unit in units:
        if unit.id not in first:
            first[unit.id] = unit
            counts[unit.id] = 0
        counts[unit.id] += 1

    return [
        Item(id=item_id, w=unit.w, h=unit.h, d=unit.d, quantity=counts[item_id])
        for item_id, unit in first.items()
    ]
