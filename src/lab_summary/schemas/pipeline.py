from __future__ import annotations
from typing import Any
from pydantic import BaseModel
from lab_summary.schemas.summary import ParsedSummary


class StageResult(BaseModel):
    stage_name: str
    input_summary: str
    output: dict[str, Any]
    reasoning: str
    timing_seconds: float


class PipelineResult(BaseModel):
    source_path: str
    language: str
    stages: list[StageResult]
    summary: ParsedSummary
    total_time_seconds: float
    success: bool
    error: str | None = None
