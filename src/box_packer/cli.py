from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from box_packer.api import build_plan
from box_packer.config import configure_logging
from box_packer.io.schemas import PackRequestSchema, PackResponseSchema
from box_packer.metrics import box_metrics
from box_packer.models import BoxType

logger = logging.getLogger(__name__)


def load_input(path: Path) -> PackRequestSchema:
    """Read a request JSON file: {"items": [...], "boxes": [...]}."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return PackRequestSchema.model_validate(data)


def write_plan(plan: PackResponseSchema, output_path: str) -> None:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(plan.model_dump_json(indent=2), encoding="utf-8")


def print_summary(plan: PackResponseSchema, boxes: list[BoxType]) -> None:
    by_id = {b.id: b for b in boxes}
    print(f"📦 Boxes used      : {len(plan.packed_boxes)}")
    for i, packed in enumerate(plan.packed_boxes, start=1):
        _, _, fill_rate = box_metrics(by_id[packed.box_id], packed.contents)
        print(f"  #{i} {packed.box_id}: {len(packed.contents)} items, fill {fill_rate * 100:.1f}%")
    unpacked_units = sum(item.quantity for item in plan.unpacked_items)
    print(f"❌ Unpacked units  : {unpacked_units}")
    print(f"📊 Total volume    : {plan.total_volume}")
    print(f"📊 Utilization     : {plan.utilization_percent:.2f}%")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Box Packer CLI")
    parser.add_argument("--input", required=True, help="Input request JSON file")
    parser.add_argument("--output", required=True, help="Output plan JSON file")
    parser.add_argument("--quiet", action="store_true", help="Do not print the summary")

    args = parser.parse_args(argv)
    configure_logging()

    try:
        request = load_input(Path(args.input))
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Invalid input {args.input}: {e}")
        return 2

    plan = build_plan(request)
    write_plan(plan, args.output)

    if not args.quiet:
        print_summary(plan, request.boxes)
        print(f"✅ Plan written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
