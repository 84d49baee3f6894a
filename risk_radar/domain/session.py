from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from risk_radar.contracts.schemas import AnalysisResult
from risk_radar.domain.regions import RegionCode, get_region
from risk_radar.domain.state_machine import InvalidTransitionError, StateMachine
from risk_radar.domain.states import SessionPhase
from risk_radar.domain.submission import ContractDraft, load_from_file, set_text, validate_submission


@dataclass(frozen=True)
class SessionState:
    phase: SessionPhase = SessionPhase.NO_REGION
    region_code: RegionCode | None = None
    draft: ContractDraft = field(default_factory=ContractDraft)
    result: AnalysisResult | None = None
    expanded_flags: frozenset[int] = frozenset()
    notice: str | None = None

    @property
    def is_analyzing(self) -> bool:
        return self.phase == SessionPhase.ANALYZING


@dataclass(frozen=True)
class SelectRegion:
    code: RegionCode | str


@dataclass(frozen=True)
class EditText:
    text: str


@dataclass(frozen=True)
class LoadFile:
    file_name: str
    data: bytes | str


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class AnalysisSucceeded:
    result: AnalysisResult


@dataclass(frozen=True)
class AnalysisFailed:
    notice: str


@dataclass(frozen=True)
class ToggleFlag:
    index: int


@dataclass(frozen=True)
class Reset:
    pass


SessionEvent = Union[SelectRegion, EditText, LoadFile, Submit, AnalysisSucceeded, AnalysisFailed, ToggleFlag, Reset]

_sm = StateMachine()


def initial_state() -> SessionState:
    return SessionState()


def reduce(state: SessionState, event: SessionEvent) -> SessionState:
    """Compute the next session state for ``event``.

    Pure: ``state`` is never mutated. Raises ``ValidationError`` for a draft
    that is too short to submit and ``InvalidTransitionError`` for events the
    current phase does not accept.
    """
    outcome_events = (AnalysisSucceeded, AnalysisFailed)
    if state.is_analyzing and not isinstance(event, outcome_events):
        raise InvalidTransitionError(f"{type(event).__name__} is not accepted while an analysis is running")

    if isinstance(event, SelectRegion):
        region = get_region(event.code)
        phase = _sm.transition(state.phase, SessionPhase.REGION_SELECTED)
        return replace(
            state,
            phase=phase,
            region_code=region.code,
            result=None,
            expanded_flags=frozenset(),
            notice=None,
        )

    if isinstance(event, EditText):
        return replace(state, draft=set_text(state.draft, event.text))

    if isinstance(event, LoadFile):
        return replace(state, draft=load_from_file(state.draft, event.file_name, event.data))

    if isinstance(event, Submit):
        if state.phase != SessionPhase.REGION_SELECTED:
            raise InvalidTransitionError(f"Cannot submit from {state.phase.value}")
        validate_submission(state.draft.text)
        phase = _sm.transition(state.phase, SessionPhase.ANALYZING)
        return replace(state, phase=phase, notice=None)

    if isinstance(event, AnalysisSucceeded):
        phase = _sm.transition(state.phase, SessionPhase.RESULT_SHOWN)
        return replace(state, phase=phase, result=event.result, expanded_flags=frozenset(), notice=None)

    if isinstance(event, AnalysisFailed):
        phase = _sm.transition(state.phase, SessionPhase.REGION_SELECTED)
        return replace(state, phase=phase, result=None, notice=event.notice)

    if isinstance(event, ToggleFlag):
        if state.phase != SessionPhase.RESULT_SHOWN or state.result is None:
            raise InvalidTransitionError("No result is displayed")
        if not 0 <= event.index < len(state.result.red_flags):
            raise IndexError(f"Red flag index out of range: {event.index}")
        return replace(state, expanded_flags=state.expanded_flags ^ {event.index})

    if isinstance(event, Reset):
        if state.phase != SessionPhase.NO_REGION:
            _sm.transition(state.phase, SessionPhase.NO_REGION)
        return initial_state()

    raise TypeError(f"Unsupported session event: {event!r}")
