"""Schema definitions for lab summary parsing."""
from lab_summary.schemas.summary import ParsedSummary, TestRecord, Status
from lab_summary.schemas.pipeline import StageResult, PipelineResult
from lab_summary.schemas.config import PipelineConfig

__all__ = [
    "ParsedSummary", "TestRecord", "Status",
    "StageResult", "PipelineResult", "PipelineConfig",
]
