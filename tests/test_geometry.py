from __future__ import annotations

from box_packer.geometry import boxes_overlap, fits, has_overlap, intersects, point_inside, rotations
from box_packer.models import BoxType, Placement


def test_stacked_items_share_no_volume() -> None:
    """A 4-cube resting on top of another one does not collide with it."""
    below = (0, 0, 0, 4, 4, 4)
    above = (0, 4, 0, 4, 8, 4)

    assert boxes_overlap(below, above) is False
    assert boxes_overlap(above, below) is False


def test_shifted_item_collides_by_one_unit() -> None:
    """Sliding the upper item down a single unit makes the bounds intersect."""
    below = (0, 0, 0, 4, 4, 4)
    sunk = (0, 3, 0, 4, 7, 4)
    apart = (10, 10, 10, 12, 12, 12)

    assert boxes_overlap(below, sunk) is True
    assert boxes_overlap(below, apart) is False


def test_touching_faces_do_not_intersect() -> None:
    """Items sharing a face do not collide."""
    a = Placement(item_id="a", x=0, y=0, z=0, w=5, h=5, d=5)
    b = Placement(item_id="b", x=5, y=0, z=0, w=5, h=5, d=5)

    assert intersects(a, b) is False
    assert intersects(b, a) is False


def test_overlap_on_two_axes_only_is_not_intersection() -> None:
    """Overlap on two axes is not enough to collide."""
    a = Placement(item_id="a", x=0, y=0, z=0, w=5, h=5, d=5)
    b = Placement(item_id="b", x=2, y=2, z=7, w=5, h=5, d=5)

    assert intersects(a, b) is False


def test_contained_box_intersects() -> None:
    """An item inside another one collides with it."""
    outer = Placement(item_id="outer", x=0, y=0, z=0, w=10, h=10, d=10)
    inner = Placement(item_id="inner", x=2, y=2, z=2, w=1, h=1, d=1)

    assert intersects(outer, inner) is True
    assert has_overlap([outer], 2, 2, 2, 1, 1, 1) is True
    assert has_overlap([outer], 10, 0, 0, 1, 1, 1) is False


def test_rotations_returns_six_permutations_with_duplicates() -> None:
    """All six orientations are listed, repeats included."""
    rots = rotations(1, 2, 3)
    assert len(rots) == 6
    assert sorted(rots) == sorted({(1, 2, 3), (1, 3, 2), (2, 1, 3), (2, 3, 1), (3, 1, 2), (3, 2, 1)})

    cube = rotations(4, 4, 4)
    assert cube == [(4, 4, 4)] * 6


def test_fits_respects_all_walls() -> None:
    """fits() rejects anything crossing a wall or a negative origin."""
    box = BoxType(id="box", w=10, h=20, d=30)

    assert fits(box, 0, 0, 0, 10, 20, 30) is True
    assert fits(box, 1, 0, 0, 10, 20, 30) is False
    assert fits(box, 0, 1, 0, 10, 20, 30) is False
    assert fits(box, 0, 0, 1, 10, 20, 30) is False
    assert fits(box, -1, 0, 0, 1, 1, 1) is False


def test_point_inside_is_half_open() -> None:
    """Minimum faces are inside a placement, maximum faces are not."""
    p = Placement(item_id="p", x=2, y=2, z=2, w=3, h=3, d=3)

    assert point_inside(2, 2, 2, p) is True
    assert point_inside(4, 4, 4, p) is True
    assert point_inside(5, 2, 2, p) is False
    assert point_inside(2, 5, 2, p) is False
    assert point_inside(1, 2, 2, p) is False
