from __future__ import annotations

from typing import Iterable

from box_packer.models import BoxType, PackedBox, Placement


def used_volume(contents: Iterable[Placement]) -> int:
    return sum(p.volume for p in contents)


def box_metrics(box: BoxType, contents: list[Placement]) -> tuple[int, int, float]:
    used = used_volume(contents)
    box_volume = box.volume
    fill_rate = 0.0 if box_volume == 0 else used / box_volume
    return used, box_volume, fill_rate


def run_metrics(packed_boxes: list[PackedBox], box_types: Iterable[BoxType]) -> tuple[int, float]:
    """
    Totals across every committed box.

    Returns (total_volume, utilization_percent) where total_volume is the sum of
    committed box volumes and utilization is packed item volume over it.
    """
    by_id = {b.id: b for b in box_types}
    total_volume = 0
    total_used = 0
    for packed in packed_boxes:
        total_volume += by_id[packed.box_id].volume
        total_used += used_volume(packed.contents)

    utilization = 0.0 if total_volume == 0 else total_used / total_volume * 100
    return total_volume, utilization
