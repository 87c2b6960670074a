from dataclasses import dataclass
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class RawDetection:
    """One neural detection from the raw detection array (12 values per detection)."""
    class_id: int = 0
    txnc: float = 0.0
    tync: float = 0.0
    ta: float = 0.0
    corner0_x: float = 0.0
    corner0_y: float = 0.0
    corner1_x: float = 0.0
    corner1_y: float = 0.0
    corner2_x: float = 0.0
    corner2_y: float = 0.0
    corner3_x: float = 0.0
    corner3_y: float = 0.0

    @property
    def corners(self) -> List[Tuple[float, float]]:
        return [
            (self.corner0_x, self.corner0_y),
            (self.corner1_x, self.corner1_y),
            (self.corner2_x, self.corner2_y),
            (self.corner3_x, self.corner3_y),
        ]


class ClassifierTarget(BaseModel):
    """Neural classifier result from the JSON results output."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    class_name: Optional[str] = Field(None, alias="class")
    class_id: float = Field(0.0, alias="classID")
    confidence: float = Field(0.0, alias="conf")
    zone: float = 0.0
    tx: float = 0.0
    tx_pixels: float = Field(0.0, alias="txp")
    ty: float = 0.0
    ty_pixels: float = Field(0.0, alias="typ")


class DetectorTarget(BaseModel):
    """Neural detector result from the JSON results output."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    class_name: Optional[str] = Field(None, alias="class")
    class_id: float = Field(0.0, alias="classID")
    confidence: float = Field(0.0, alias="conf")
    ta: float = 0.0
    tx: float = 0.0
    ty: float = 0.0
    tx_pixels: float = Field(0.0, alias="txp")
    ty_pixels: float = Field(0.0, alias="typ")
    tx_nocrosshair: float = Field(0.0, alias="tx_nocross")
    ty_nocrosshair: float = Field(0.0, alias="ty_nocross")
