from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import groq
from groq import Groq
from pydantic import ValidationError as SchemaValidationError

from risk_radar.config import settings
from risk_radar.contracts.schemas import RESPONSE_SCHEMA, RESPONSE_SCHEMA_NAME, AnalysisResult
from risk_radar.domain.errors import ConfigurationError, EmptyResponseError, ParseError, TransportError
from risk_radar.domain.regions import RegionConfig
from risk_radar.services.prompt_builder import MAX_CONTRACT_CHARS, build_prompt

logger = logging.getLogger(__name__)


class AnalysisProvider(Protocol):
    def analyze(self, contract_text: str, region: RegionConfig) -> AnalysisResult:
        ...


class GroqAnalysisProvider:
    """Runs the contract risk assessment as a single Groq chat completion.

    The response is constrained to ``RESPONSE_SCHEMA`` by the provider. Locally
    the JSON is only coerced into ``AnalysisResult``; score ranges, rating vs
    score consistency and severity vocabulary are not checked.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        client: Any | None = None,
    ) -> None:
        key = settings.groq_api_key if api_key is None else api_key
        self.model = model or settings.groq_model
        self.user_agent = settings.groq_user_agent
        if client is not None:
            self.client = client
        else:
            self.client = Groq(api_key=key) if key else None

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def analyze(self, contract_text: str, region: RegionConfig) -> AnalysisResult:
        if not self.client:
            raise ConfigurationError("API Key is missing. Please check your environment configuration.")

        logger.info(
            "Analyzing %d chars against %s law (truncated=%s, model=%s)",
            len(contract_text),
            region.code.value,
            len(contract_text) > MAX_CONTRACT_CHARS,
            self.model,
        )
        content = self._chat_json(build_prompt(contract_text, region))
        result = self._parse(content)
        logger.info("Analysis complete for %s: risk_score=%s", region.code.value, result.risk_score)
        return result

    def _chat_json(self, prompt: str) -> str:
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                temperature=0,
                response_format={
                    "type": "json_schema",
                    "json_schema": {"name": RESPONSE_SCHEMA_NAME, "schema": RESPONSE_SCHEMA},
                },
                messages=[{"role": "user", "content": prompt}],
                extra_headers={"User-Agent": self.user_agent} if self.user_agent else None,
            )
        except groq.APIError as exc:
            raise TransportError(f"Groq request failed: {exc}") from exc

        content = completion.choices[0].message.content if completion.choices else None
        if not content or not content.strip():
            raise EmptyResponseError("Empty response from AI")
        return content

    @staticmethod
    def _parse(content: str) -> AnalysisResult:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Response is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
        try:
            return AnalysisResult.model_validate(data)
        except SchemaValidationError as exc:
            raise ParseError(f"Response does not fit the result shape: {exc}") from exc
