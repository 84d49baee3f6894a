from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


RISK_LEVEL_ORDER: tuple[RiskLevel, ...] = (
    RiskLevel.LOW,
    RiskLevel.MEDIUM,
    RiskLevel.HIGH,
    RiskLevel.CRITICAL,
)


class RedFlag(BaseModel):
    # Severity stays a plain string: provider output is shown verbatim.
    model_config = ConfigDict(extra="ignore")

    issue: str = ""
    law_violated: str = ""
    severity: str = RiskLevel.LOW.value
    explanation: str = ""
    suggested_fix: str = ""


class AnalysisResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    risk_score: int = 0
    risk_rating: str = ""
    summary: str = ""
    red_flags: list[RedFlag] = Field(default_factory=list)
    compliant_points: list[str] = Field(default_factory=list)
    applicable_laws_identified: list[str] = Field(default_factory=list)


_RED_FLAG_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "issue": {"type": "string"},
        "law_violated": {"type": "string", "description": "Specific act or section violated"},
        "severity": {"type": "string", "enum": [level.value for level in RISK_LEVEL_ORDER]},
        "explanation": {"type": "string"},
        "suggested_fix": {"type": "string", "description": "Specific legal language to fix the issue"},
    },
    "required": ["issue", "law_violated", "severity", "explanation", "suggested_fix"],
    "additionalProperties": False,
}

RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "risk_score": {"type": "integer", "description": "0-100 score where 100 is highest risk"},
        "risk_rating": {"type": "string", "description": "Low, Medium, High, or Critical"},
        "summary": {
            "type": "string",
            "description": "A concise 2-sentence executive summary of the contract's safety.",
        },
        "red_flags": {"type": "array", "items": _RED_FLAG_SCHEMA},
        "compliant_points": {
            "type": "array",
            "items": {"type": "string"},
            "description": "List of 3 good things about the contract",
        },
        "applicable_laws_identified": {
            "type": "array",
            "items": {"type": "string"},
            "description": "List of laws that were relevant to this analysis",
        },
    },
    "required": [
        "risk_score",
        "risk_rating",
        "summary",
        "red_flags",
        "compliant_points",
        "applicable_laws_identified",
    ],
    "additionalProperties": False,
}

RESPONSE_SCHEMA_NAME = "contract_risk_assessment"
