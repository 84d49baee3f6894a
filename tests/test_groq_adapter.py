import json

import groq
import httpx
import pytest

from conftest import CONTRACT_TEXT, fake_groq_client
from risk_radar.contracts.schemas import RESPONSE_SCHEMA
from risk_radar.domain.errors import (
    AnalysisError,
    ConfigurationError,
    EmptyResponseError,
    ParseError,
    TransportError,
)
from risk_radar.domain.regions import get_region
from risk_radar.infra.groq_adapter import GroqAnalysisProvider


def test_missing_api_key_fails_before_any_request():
    provider = GroqAnalysisProvider(api_key="")
    assert not provider.enabled
    with pytest.raises(ConfigurationError) as info:
        provider.analyze(CONTRACT_TEXT, get_region("SG"))
    assert info.value.kind == "configuration"


def test_successful_call_returns_result_and_sends_one_schema_constrained_request(sg_response_json):
    client = fake_groq_client(content=sg_response_json)
    provider = GroqAnalysisProvider(model="test-model", client=client)

    result = provider.analyze(CONTRACT_TEXT, get_region("SG"))

    assert result.risk_score == 85
    assert result.risk_rating == "Critical"
    assert len(result.red_flags) == 2
    assert result.red_flags[0].law_violated == "PDPA 2012, s 26"

    calls = client.chat.completions.calls
    assert len(calls) == 1
    call = calls[0]
    assert call["model"] == "test-model"
    assert call["response_format"]["type"] == "json_schema"
    assert call["response_format"]["json_schema"]["schema"] == RESPONSE_SCHEMA
    prompt = call["messages"][0]["content"]
    assert "Singapore" in prompt
    assert "PDPA 2012" in prompt
    assert CONTRACT_TEXT in prompt


def test_transport_failure_maps_to_transport_error():
    error = groq.APIConnectionError(request=httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions"))
    client = fake_groq_client(error=error)
    provider = GroqAnalysisProvider(client=client)

    with pytest.raises(TransportError) as info:
        provider.analyze(CONTRACT_TEXT, get_region("IN"))
    assert info.value.kind == "transport"
    assert len(client.chat.completions.calls) == 1


@pytest.mark.parametrize("content", [None, "", "   "])
def test_empty_body_maps_to_empty_response_error(content):
    provider = GroqAnalysisProvider(client=fake_groq_client(content=content))
    with pytest.raises(EmptyResponseError):
        provider.analyze(CONTRACT_TEXT, get_region("MY"))


@pytest.mark.parametrize("content", ["not json at all", "[1, 2, 3]", json.dumps({"risk_score": "very high"})])
def test_unparseable_body_maps_to_parse_error(content):
    provider = GroqAnalysisProvider(client=fake_groq_client(content=content))
    with pytest.raises(ParseError) as info:
        provider.analyze(CONTRACT_TEXT, get_region("HK"))
    assert isinstance(info.value, AnalysisError)


def test_inconsistent_but_parseable_response_passes_through_uninspected():
    content = json.dumps(
        {
            "risk_score": 92,
            "risk_rating": "Low",
            "summary": "",
            "red_flags": [{"issue": "Odd", "severity": "Catastrophic"}],
        }
    )
    provider = GroqAnalysisProvider(client=fake_groq_client(content=content))

    result = provider.analyze(CONTRACT_TEXT, get_region("AE"))

    assert result.risk_score == 92
    assert result.risk_rating == "Low"
    assert result.red_flags[0].severity == "Catastrophic"
    assert result.compliant_points == []
    assert result.applicable_laws_identified == []
