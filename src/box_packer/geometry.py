"""Geometry utilities for box packing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .models import BoxType, Placement

Bounds = tuple[int, int, int, int, int, int]


def boxes_overlap(a: Bounds, b: Bounds) -> bool:
    """
    True when two cuboids share interior volume.

    Bounds are min corner then max corner: (x1, y1, z1, x2, y2, z2).
    Items stacked face to face (one max face equal to the other min face) do not collide.
    """
    ax1, ay1, az1, ax2, ay2, az2 = a
    bx1, by1, bz1, bx2, by2, bz2 = b

    return (ax1 < bx2 and ax2 > bx1) and (ay1 < by2 and ay2 > by1) and (az1 < bz2 and az2 > bz1)


def rotations(w: int, h: int, d: int) -> list[tuple[int, int, int]]:
    """
    Return the 6 axis-aligned orientations of a (w, h, d) cuboid.

    Equal dimensions yield repeated orientations; they are kept.
    """
    return [
        (w, h, d),
        (w, d, h),
        (h, w, d),
        (h, d, w),
        (d, w, h),
        (d, h, w),
    ]


def placement_bounds(p: "Placement") -> Bounds:
    return (p.x, p.y, p.z, p.x + p.w, p.y + p.h, p.z + p.d)


def fits(box: "BoxType", x: int, y: int, z: int, w: int, h: int, d: int) -> bool:
    """True when the cuboid at (x, y, z) with size (w, h, d) lies inside the box."""
    return (
        x >= 0 and y >= 0 and z >= 0
        and x + w <= box.w
        and y + h <= box.h
        and z + d <= box.d
    )


def intersects(a: "Placement", b: "Placement") -> bool:
    return boxes_overlap(placement_bounds(a), placement_bounds(b))


def has_overlap(placements: Iterable["Placement"], x: int, y: int, z: int, w: int, h: int, d: int) -> bool:
    """Check a candidate cuboid against every existing placement."""
    candidate = (x, y, z, x + w, y + h, z + d)
    for p in placements:
        if boxes_overlap(placement_bounds(p), candidate):
            return True
    return False


def point_inside(x: int, y: int, z: int, p: "Placement") -> bool:
    """Half-open containment: the minimum faces belong to the placement, the maximum faces do not."""
    return (
        p.x <= x < p.x + p.w
        and p.y <= y < p.y + p.h
        and p.z <= z < p.z + p.d
    )
