from __future__ import annotations
from typing import Literal
from pydantic import BaseModel

from lab_summary.schemas.defaults import DEFAULT_ICON, DEFAULT_STATUS

Status = Literal["low", "normal", "high"]


class TestRecord(BaseModel):
    __test__ = False  # not a pytest class

    name: str = ""  # e.g., "Hemoglobin"
    alias: str | None = None  # e.g., "Hb", only from (aka "...")
    icon: str = DEFAULT_ICON
    importance: str = ""
    result: str  # "10 g/dL", or the variant's no-reading placeholder
    status: Status = DEFAULT_STATUS
    explanation: str = ""
    tip: str = ""
    verdict: str = ""
    reference_range: str | None = None  # Not produced by the baseline grammar


class ParsedSummary(BaseModel):
    tests: list[TestRecord] = []
    final_tip: str = ""
