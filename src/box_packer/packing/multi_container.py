from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from box_packer.models import BoxTrial, BoxType, Item, PackedBox, PackingResult, UnitItem
from box_packer.packing.items import expand_items, sort_items_by_volume
from box_packer.packing.single_box import pack_into_box

logger = logging.getLogger(__name__)


def find_best_box(
    units: Sequence[UnitItem],
    box_types: Sequence[BoxType],
) -> Optional[tuple[BoxType, BoxTrial]]:
    """
    Simulate packing `units` into every box type and pick the winner.

    Winner: greatest packed volume; on equal volume the smaller box.
    `box_types` is expected in ascending volume order, so a full tie keeps the
    earlier type. Returns None when no type can take a single unit.
    """
    best: Optional[tuple[BoxType, BoxTrial]] = None

    for box in box_types:
        trial = pack_into_box(units, box)
        if trial.packed_volume <= 0:
            continue

        if best is None:
            best = (box, trial)
            continue

        best_box, best_trial = best
        if trial.packed_volume > best_trial.packed_volume:
            best = (box, trial)
        elif trial.packed_volume == best_trial.packed_volume and box.volume < best_box.volume:
            best = (box, trial)

    return best


def filter_unpacked(units: Sequence[UnitItem], packed: Sequence[bool]) -> list[UnitItem]:
    return [u for u, is_packed in zip(units, packed) if not is_packed]


def pack_units(units: Sequence[UnitItem], box_types: Iterable[BoxType]) -> PackingResult:
    """
    Pack already-ordered units into as many boxes as needed.

    Each round commits the best box type for the units still remaining.
    A type may be committed any number of times. Stops when nothing remains
    or no type can place a single remaining unit.
    """
    boxes = sorted(box_types, key=lambda b: b.volume)
    remaining = list(units)
    packed_boxes: list[PackedBox] = []

    while remaining:
        best = find_best_box(remaining, boxes)
        if best is None:
            logger.debug(f"No box type can place any of the {len(remaining)} remaining items")
            break

        box, trial = best
        packed_boxes.append(PackedBox(box_id=box.id, contents=trial.placements))
        logger.debug(
            f"Committed box #{len(packed_boxes)} type={box.id} "
            f"with {len(trial.placements)} items, volume {trial.packed_volume}/{box.volume}"
        )

        remaining = filter_unpacked(remaining, trial.packed)

    return PackingResult(packed_boxes=packed_boxes, unpacked=remaining)


def pack(items: Iterable[Item], box_types: Iterable[BoxType]) -> PackingResult:
    """
    Expand items by quantity, order them largest first and pack them.

    Returns the committed boxes in commit order and the units that were never placed.
    """
    units = sort_items_by_volume(expand_items(items))
    return pack_units(units, box_types)
