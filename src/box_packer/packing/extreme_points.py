# src/box_packer/packing/extreme_points.py

from __future__ import annotations

from dataclasses import dataclass

from box_packer.geometry import point_inside
from box_packer.models import BoxType, Placement


@dataclass(frozen=True)
class Anchor:
    """
    Extreme point: a candidate corner plus the free span up to the box walls.

    The span is only an upper bound. Candidates built on an anchor must still
    be checked against every placement.
    """

    x: int
    y: int
    z: int
    w: int
    h: int
    d: int

    @property
    def corner(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)


def initial_anchors(box: BoxType) -> list[Anchor]:
    """A fresh frontier for an empty box: the origin spanning the full box."""
    return [Anchor(0, 0, 0, box.w, box.h, box.d)]


def sort_anchors(anchors: list[Anchor]) -> list[Anchor]:
    # Sort by (y, z, x): floor first, then back to front, then left to right
    return sorted(anchors, key=lambda a: (a.y, a.z, a.x))


def _inside_box(box: BoxType, a: Anchor) -> bool:
    return 0 <= a.x < box.w and 0 <= a.y < box.h and 0 <= a.z < box.d


def deduplicate(anchors: list[Anchor]) -> list[Anchor]:
    """Collapse anchors sharing a corner, keeping the first occurrence."""
    seen: set[tuple[int, int, int]] = set()
    out: list[Anchor] = []
    for a in anchors:
        if a.corner in seen:
            continue
        seen.add(a.corner)
        out.append(a)
    return out


def update_anchors(
    anchors: list[Anchor],
    placed: Placement,
    box: BoxType,
    placements: list[Placement],
) -> list[Anchor]:
    """
    Regenerate the frontier after `placed` was committed.

    `placements` must already contain `placed`.
    New candidates sit on the right, top and front faces of the placed item.
    """
    x, y, z = placed.x, placed.y, placed.z
    right_x, top_y, front_z = x + placed.w, y + placed.h, z + placed.d

    candidates = [
        Anchor(right_x, y, z, box.w - right_x, box.h - y, box.d - z),
        Anchor(x, top_y, z, box.w - x, box.h - top_y, box.d - z),
        Anchor(x, y, front_z, box.w - x, box.h - y, box.d - front_z),
    ]

    valid: list[Anchor] = []
    for a in candidates:
        if not _inside_box(box, a):
            continue
        if any(point_inside(a.x, a.y, a.z, p) for p in placements):
            continue
        valid.append(a)

    for a in anchors:
        if not point_inside(a.x, a.y, a.z, placed):
            valid.append(a)

    return deduplicate(valid)
