from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from risk_radar.config import settings
from risk_radar.contracts.payloads import AnalyzeRequest, RegionPayload, ScraperStatusPayload
from risk_radar.contracts.schemas import AnalysisResult
from risk_radar.domain.errors import (
    GENERIC_FAILURE_NOTICE,
    AnalysisError,
    ConfigurationError,
    UnknownRegionError,
    ValidationError,
)
from risk_radar.domain.regions import RegionConfig, get_region, list_regions
from risk_radar.domain.status import SYSTEM_STATUS
from risk_radar.domain.submission import validate_submission
from risk_radar.infra.groq_adapter import AnalysisProvider, GroqAnalysisProvider
from risk_radar.infra.logger import setup_logger

setup_logger("risk_radar", settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Legal Risk Radar API", version="1.0.0")
provider = GroqAnalysisProvider()


def get_provider() -> AnalysisProvider:
    return provider


def _region_payload(region: RegionConfig) -> RegionPayload:
    return RegionPayload(
        code=region.code.value,
        name=region.name,
        flag=region.flag,
        currency=region.currency,
        laws=list(region.laws),
        sources=list(region.sources),
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(_request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(UnknownRegionError)
async def unknown_region_handler(_request: Request, exc: UnknownRegionError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.get("/health")
def health() -> dict[str, Any]:
    return {
        "status": "ok",
        "provider_configured": settings.groq_configured(),
        "model": settings.groq_model,
    }


@app.get("/regions")
def regions() -> list[RegionPayload]:
    return [_region_payload(region) for region in list_regions()]


@app.get("/regions/{code}")
def region_detail(code: str) -> RegionPayload:
    return _region_payload(get_region(code.upper()))


@app.get("/status")
def system_status() -> list[ScraperStatusPayload]:
    return [ScraperStatusPayload(**asdict(entry)) for entry in SYSTEM_STATUS]


@app.post("/analyze")
def analyze(payload: AnalyzeRequest, analysis_provider: AnalysisProvider = Depends(get_provider)) -> AnalysisResult:
    region = get_region(payload.region.upper())
    text = validate_submission(payload.contract_text)
    try:
        return analysis_provider.analyze(text, region)
    except ConfigurationError as exc:
        logger.error("Analysis unavailable [%s]: %s", exc.kind, exc)
        raise HTTPException(status_code=503, detail=GENERIC_FAILURE_NOTICE) from exc
    except AnalysisError as exc:
        logger.error("Analysis failed [%s]: %s", exc.kind, exc)
        raise HTTPException(status_code=502, detail=GENERIC_FAILURE_NOTICE) from exc
