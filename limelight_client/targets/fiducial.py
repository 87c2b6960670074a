from dataclasses import dataclass
from typing import Optional

from pydantic import Field

from .retroreflective import RetroreflectiveTarget


@dataclass(frozen=True)
class RawFiducialTarget:
    """One AprilTag from the raw fiducial array (7 values per tag)."""
    id: int = 0
    txnc: float = 0.0
    tync: float = 0.0
    ta: float = 0.0
    dist_to_camera: float = 0.0
    dist_to_robot: float = 0.0
    ambiguity: float = 0.0


class FiducialTarget(RetroreflectiveTarget):
    """AprilTag result from the JSON results output."""

    fiducial_id: float = Field(0.0, alias="fID")
    fiducial_family: Optional[str] = Field(None, alias="fam")
