# src/box_packer/packing/single_box.py

from __future__ import annotations

import logging
from typing import Optional, Sequence

from box_packer.geometry import fits, has_overlap, rotations
from box_packer.models import BoxTrial, BoxType, Placement, UnitItem
from box_packer.packing.extreme_points import (
    Anchor,
    initial_anchors,
    sort_anchors,
    update_anchors,
)

logger = logging.getLogger(__name__)

# Position weights: low y first, then low z, then low x (bottom-left-back)
WEIGHT_Y = 1000
WEIGHT_Z = 100
WEIGHT_X = 10


def placement_score(anchor: Anchor, w: int, h: int, d: int) -> int:
    """
    Lower is better.

    Position dominates; the leftover span of the anchor breaks ties in favour
    of the tightest fit.
    """
    score = anchor.y * WEIGHT_Y + anchor.z * WEIGHT_Z + anchor.x * WEIGHT_X
    score += (anchor.w - w) + (anchor.h - h) + (anchor.d - d)
    return score


def find_best_placement(
    anchors: list[Anchor],
    item: UnitItem,
    box: BoxType,
    placements: list[Placement],
) -> Optional[tuple[Anchor, tuple[int, int, int]]]:
    """
    Evaluate every (anchor, rotation) pair and return the feasible one with the
    lowest score, or None if the item fits nowhere.

    The first pair wins on equal scores, so the caller's anchor order decides ties.
    """
    best: Optional[tuple[Anchor, tuple[int, int, int]]] = None
    best_score = 0

    for anchor in anchors:
        for rot in rotations(item.w, item.h, item.d):
            w, h, d = rot
            if not fits(box, anchor.x, anchor.y, anchor.z, w, h, d):
                continue
            if has_overlap(placements, anchor.x, anchor.y, anchor.z, w, h, d):
                continue

            score = placement_score(anchor, w, h, d)
            if best is None or score < best_score:
                best = (anchor, rot)
                best_score = score

    return best


def pack_into_box(items: Sequence[UnitItem], box: BoxType) -> BoxTrial:
    """
    Extreme-point packer for a single box type.
    - Tries items in the given order, each independently
    - Explores every anchor x 6 rotations and keeps the lowest score
    - Builds its own frontier; never mutates `items`
    - Deterministic (no randomness)

    packed[i] mirrors items[i].
    """
    anchors = initial_anchors(box)
    placements: list[Placement] = []
    packed = [False] * len(items)
    packed_volume = 0

    for i, item in enumerate(items):
        anchors = sort_anchors(anchors)

        choice = find_best_placement(anchors, item, box, placements)
        if choice is None:
            continue

        anchor, (w, h, d) = choice
        placement = Placement(
            item_id=item.id,
            x=anchor.x,
            y=anchor.y,
            z=anchor.z,
            w=w,
            h=h,
            d=d,
        )
        placements.append(placement)
        packed[i] = True
        packed_volume += item.volume

        anchors = update_anchors(anchors, placement, box, placements)

    logger.debug(
        f"Trial box={box.id}: packed {len(placements)}/{len(items)} items, "
        f"volume {packed_volume}/{box.volume}, anchors left {len(anchors)}"
    )

    return BoxTrial(placements=placements, packed=packed, packed_volume=packed_volume)
