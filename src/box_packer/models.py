from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """Item model with identifier, dimensions and requested quantity."""

    id: str = Field(min_length=1, description="Identifier of the item")
    w: int = Field(gt=0, description="Width of the item (x axis)")
    h: int = Field(gt=0, description="Height of the item (y axis)")
    d: int = Field(gt=0, description="Depth of the item (z axis)")
    quantity: int = Field(ge=0, description="Number of units to pack")


class BoxType(BaseModel):
    """Reusable box specification. One type can be committed many times."""

    id: str = Field(min_length=1, description="Identifier of the box type")
    w: int = Field(gt=0, description="Inner width of the box (x axis)")
    h: int = Field(gt=0, description="Inner height of the box (y axis)")
    d: int = Field(gt=0, description="Inner depth of the box (z axis)")

    @property
    def volume(self) -> int:
        return self.w * self.h * self.d


class UnitItem(BaseModel):
    """One physical unit of an Item after quantity expansion."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Identifier of the source item")
    w: int = Field(gt=0)
    h: int = Field(gt=0)
    d: int = Field(gt=0)

    @property
    def volume(self) -> int:
        return self.w * self.h * self.d

    @property
    def max_dim(self) -> int:
        return max(self.w, self.h, self.d)


class Placement(BaseModel):
    """Placement model representing item position and oriented dimensions."""

    item_id: str = Field(description="Identifier of the placed item")
    x: int = Field(ge=0, description="X coordinate of the minimum corner")
    y: int = Field(ge=0, description="Y coordinate of the minimum corner")
    z: int = Field(ge=0, description="Z coordinate of the minimum corner")

    # Effective dimensions after rotation
    w: int = Field(gt=0, description="Placed width")
    h: int = Field(gt=0, description="Placed height")
    d: int = Field(gt=0, description="Placed depth")

    @property
    def volume(self) -> int:
        return self.w * self.h * self.d


class PackedBox(BaseModel):
    """A committed box instance and everything placed in it."""

    box_id: str = Field(description="Identifier of the box type used")
    contents: list[Placement] = Field(default_factory=list)


class BoxTrial(BaseModel):
    """Outcome of packing an ordered unit list into a single box type."""

    placements: list[Placement] = Field(default_factory=list)
    packed: list[bool] = Field(default_factory=list)
    packed_volume: int = 0


class PackingResult(BaseModel):
    """Standard result returned by the multi-box packer."""

    packed_boxes: list[PackedBox] = Field(default_factory=list)
    unpacked: list[UnitItem] = Field(default_factory=list)
