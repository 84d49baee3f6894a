from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import requests

from risk_radar.config import settings
from risk_radar.contracts.payloads import ReportPayload
from risk_radar.contracts.schemas import AnalysisResult
from risk_radar.domain.errors import ExportFallback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportExport:
    content: bytes | None
    file_name: str | None
    fallback: bool

    @property
    def downloaded(self) -> bool:
        return not self.fallback and self.content is not None


def build_report_payload(result: AnalysisResult, now: datetime | None = None) -> dict[str, Any]:
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    payload = ReportPayload(
        risk_score=result.risk_score,
        summary=result.summary,
        red_flags=[flag.model_dump() for flag in result.red_flags],
        timestamp=stamp,
    )
    return payload.model_dump()


class ReportExportClient:
    """Requests a rendered PDF report from the report-generation endpoint.

    Nothing is rendered locally: when the endpoint is missing or failing the
    caller gets ``fallback=True`` and falls back to the browser print dialog.
    """

    def __init__(
        self,
        endpoint_url: str | None = None,
        timeout_seconds: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.endpoint_url = endpoint_url or settings.report_endpoint_url
        self.timeout_seconds = timeout_seconds or settings.report_timeout_seconds
        self.session = session or requests.Session()

    def export(self, result: AnalysisResult) -> ReportExport:
        try:
            content = self._request_report(build_report_payload(result))
        except ExportFallback as exc:
            logger.warning("Backend PDF generation unavailable (%s). Falling back to print.", exc)
            return ReportExport(content=None, file_name=None, fallback=True)

        file_name = f"Legal_Risk_Report_{int(time.time() * 1000)}.pdf"
        return ReportExport(content=content, file_name=file_name, fallback=False)

    def _request_report(self, payload: dict[str, Any]) -> bytes:
        try:
            response = self.session.post(
                self.endpoint_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise ExportFallback(f"request failed: {exc}") from exc

        if not response.ok:
            raise ExportFallback(f"endpoint returned HTTP {response.status_code}")
        return response.content
