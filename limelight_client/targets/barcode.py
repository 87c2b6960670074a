from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BarcodeTarget(BaseModel):
    """Barcode result from the JSON results output."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    family: Optional[str] = Field(None, alias="fam")
    data: Optional[str] = None
    tx_pixels: float = Field(0.0, alias="txp")
    ty_pixels: float = Field(0.0, alias="typ")
    tx: float = 0.0
    ty: float = 0.0
    tx_nocrosshair: float = Field(0.0, alias="tx_nocross")
    ty_nocrosshair: float = Field(0.0, alias="ty_nocross")
    ta: float = 0.0
    corners: List[List[float]] = Field(default_factory=list, alias="pts")
