from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import pytest

from risk_radar.contracts.schemas import AnalysisResult


SG_RESPONSE: dict[str, Any] = {
    "risk_score": 85,
    "risk_rating": "Critical",
    "summary": "The contract transfers personal data abroad without safeguards. Termination terms are sound.",
    "red_flags": [
        {
            "issue": "Unrestricted overseas data transfer",
            "law_violated": "PDPA 2012, s 26",
            "severity": "Critical",
            "explanation": "Personal data may be sent overseas without comparable protection.",
            "suggested_fix": "The Vendor shall not transfer Personal Data outside Singapore without prior written consent.",
        },
        {
            "issue": "Unlimited liability for the client",
            "law_violated": "Contract Act (Cap. 23)",
            "severity": "High",
            "explanation": "The client bears uncapped liability for indirect losses.",
            "suggested_fix": "Aggregate liability shall not exceed the fees paid in the preceding 12 months.",
        },
    ],
    "compliant_points": ["Clear termination clause"],
    "applicable_laws_identified": ["PDPA 2012"],
}

CONTRACT_TEXT = "Services Agreement: " + "a" * 40  # 60 characters


class FakeCompletions:
    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_groq_client(content: str | None = None, error: Exception | None = None) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions(content=content, error=error)))


class StubProvider:
    def __init__(self, result: AnalysisResult | None = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, Any]] = []

    def analyze(self, contract_text: str, region: Any) -> AnalysisResult:
        self.calls.append((contract_text, region))
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


@pytest.fixture
def sg_result() -> AnalysisResult:
    return AnalysisResult.model_validate(SG_RESPONSE)


@pytest.fixture
def sg_response_json() -> str:
    return json.dumps(SG_RESPONSE)
