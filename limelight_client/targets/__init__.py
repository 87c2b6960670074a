from .barcode import BarcodeTarget
from .fiducial import FiducialTarget, RawFiducialTarget
from .neural import ClassifierTarget, DetectorTarget, RawDetection
from .retroreflective import RetroreflectiveTarget

__all__ = [
    "BarcodeTarget",
    "ClassifierTarget",
    "DetectorTarget",
    "FiducialTarget",
    "RawDetection",
    "RawFiducialTarget",
    "RetroreflectiveTarget",
]
