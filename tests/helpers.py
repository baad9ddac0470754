from __future__ import annotations

from box_packer.geometry import intersects
from box_packer.models import BoxType, Placement


def assert_within_box(box: BoxType, placements: list[Placement]) -> None:
    for p in placements:
        assert p.x >= 0 and p.y >= 0 and p.z >= 0
        assert p.x + p.w <= box.w
        assert p.y + p.h <= box.h
        assert p.z + p.d <= box.d


def assert_no_overlaps(placements: list[Placement]) -> None:
    for i in range(len(placements)):
        for j in range(i + 1, len(placements)):
            assert not intersects(placements[i], placements[j])
