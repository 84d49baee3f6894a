from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    region: str = Field(min_length=2)
    contract_text: str = Field(default="")


class ReportPayload(BaseModel):
    risk_score: int
    summary: str
    red_flags: list[dict[str, Any]] = Field(default_factory=list)
    timestamp: str


class RegionPayload(BaseModel):
    code: str
    name: str
    flag: str
    currency: str
    laws: list[str]
    sources: list[str]


class ScraperStatusPayload(BaseModel):
    region: str
    status: str
    last_update: str
    docs_count: int
