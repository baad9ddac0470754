"""Data schemas for the request/response payloads of the service and CLI."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from box_packer.models import BoxType, Item, PackedBox


class PackRequestSchema(BaseModel):
    """Schema for a packing request."""
    items: List[Item] = Field(default_factory=list, description="Items to pack")
    boxes: List[BoxType] = Field(default_factory=list, description="Available box types")

    @field_validator("boxes")
    @classmethod
    def unique_box_ids(cls, boxes: List[BoxType]) -> List[BoxType]:
        seen = set()
        for box in boxes:
            if box.id in seen:
                raise ValueError(f"duplicate box id '{box.id}'")
            seen.add(box.id)
        return boxes

    @property
    def unit_count(self) -> int:
        return sum(item.quantity for item in self.items)


class PackResponseSchema(BaseModel):
    """Schema for a packing result."""
    packed_boxes: List[PackedBox] = Field(default_factory=list)
    unpacked_items: List[Item] = Field(default_factory=list)
    total_volume: int = Field(ge=0, description="Sum of committed box volumes")
    utilization_percent: float = Field(ge=0, le=100, description="Packed item volume over total_volume")
