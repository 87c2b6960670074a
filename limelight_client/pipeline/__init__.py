from .collator import PipelineDataCollator
from .result import PipelineResult

__all__ = ["PipelineDataCollator", "PipelineResult"]
