from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from risk_radar.contracts.schemas import AnalysisResult, RiskLevel
from risk_radar.domain.regions import get_region, list_regions
from risk_radar.domain.session import SessionState
from risk_radar.domain.states import SessionPhase
from risk_radar.domain.submission import submit_enabled

PREVIEW_LIMIT = 3
EMPTY_FLAGS_MESSAGE = "No critical red flags found!"


class RiskBand(str, Enum):
    SAFE = "safe"
    CAUTION = "caution"
    DANGER = "danger"


BAND_TONES: dict[RiskBand, str] = {
    RiskBand.SAFE: "green",
    RiskBand.CAUTION: "yellow",
    RiskBand.DANGER: "red",
}

SEVERITY_TONES: dict[str, str] = {
    RiskLevel.CRITICAL.value: "red",
    RiskLevel.HIGH.value: "orange",
    RiskLevel.MEDIUM.value: "yellow",
}


def risk_band(score: int) -> RiskBand:
    # Derived from the score only; the provider's rating label is not consulted.
    if score < 30:
        return RiskBand.SAFE
    if score < 70:
        return RiskBand.CAUTION
    return RiskBand.DANGER


def severity_tone(severity: str) -> str:
    return SEVERITY_TONES.get(severity, "blue")


@dataclass(frozen=True)
class FlagSummary:
    issue: str
    severity: str
    tone: str


@dataclass(frozen=True)
class FindingView:
    index: int
    issue: str
    severity: str
    tone: str
    law_violated: str
    explanation: str
    suggested_fix: str
    expanded: bool


@dataclass(frozen=True)
class ResultView:
    score: int
    score_label: str
    band: RiskBand
    band_tone: str
    rating: str
    summary: str
    statutes_count: int
    gauge_fraction: float
    compliant_points: list[str]
    preview: list[FlagSummary]
    findings: list[FindingView]
    empty_message: str | None


@dataclass(frozen=True)
class RegionCard:
    code: str
    name: str
    flag: str
    law_count: int
    selected: bool


@dataclass(frozen=True)
class SessionView:
    phase: SessionPhase
    region_cards: list[RegionCard]
    active_region_name: str | None
    active_laws: list[str]
    show_features: bool
    show_input: bool
    submit_enabled: bool
    is_loading: bool
    char_count: int
    file_label: str | None
    notice: str | None
    result: ResultView | None


def build_result_view(result: AnalysisResult, expanded: frozenset[int] = frozenset()) -> ResultView:
    band = risk_band(result.risk_score)
    flags = result.red_flags
    preview = [
        FlagSummary(issue=flag.issue, severity=flag.severity, tone=severity_tone(flag.severity))
        for flag in flags[:PREVIEW_LIMIT]
    ]
    findings = [
        FindingView(
            index=idx,
            issue=flag.issue,
            severity=flag.severity,
            tone=severity_tone(flag.severity),
            law_violated=flag.law_violated,
            explanation=flag.explanation,
            suggested_fix=flag.suggested_fix,
            expanded=idx in expanded,
        )
        for idx, flag in enumerate(flags)
    ]
    return ResultView(
        score=result.risk_score,
        score_label=f"{result.risk_score}/100",
        band=band,
        band_tone=BAND_TONES[band],
        rating=result.risk_rating,
        summary=result.summary,
        statutes_count=len(result.applicable_laws_identified),
        gauge_fraction=max(0.0, min(1.0, result.risk_score / 100)),
        compliant_points=list(result.compliant_points),
        preview=preview,
        findings=findings,
        empty_message=None if flags else EMPTY_FLAGS_MESSAGE,
    )


def build_view(state: SessionState) -> SessionView:
    """Describe everything the UI should show for ``state``."""
    region = get_region(state.region_code) if state.region_code else None
    showing_result = state.phase == SessionPhase.RESULT_SHOWN and state.result is not None

    cards = [
        RegionCard(
            code=cfg.code.value,
            name=cfg.name,
            flag=cfg.flag,
            law_count=len(cfg.laws),
            selected=region is not None and cfg.code == region.code,
        )
        for cfg in list_regions()
    ]
    return SessionView(
        phase=state.phase,
        region_cards=cards,
        active_region_name=region.name if region else None,
        active_laws=list(region.laws) if region else [],
        show_features=region is None,
        show_input=region is not None and not showing_result,
        submit_enabled=region is not None and submit_enabled(state.draft.text, state.is_analyzing),
        is_loading=state.is_analyzing,
        char_count=state.draft.char_count,
        file_label=state.draft.file_name,
        notice=state.notice,
        result=build_result_view(state.result, state.expanded_flags) if showing_result else None,
    )
