from __future__ import annotations

import logging

from risk_radar.domain.errors import GENERIC_FAILURE_NOTICE, AnalysisError
from risk_radar.domain.regions import RegionCode, get_region
from risk_radar.domain.session import (
    AnalysisFailed,
    AnalysisSucceeded,
    EditText,
    LoadFile,
    Reset,
    SelectRegion,
    SessionEvent,
    SessionState,
    Submit,
    ToggleFlag,
    initial_state,
    reduce,
)
from risk_radar.infra.groq_adapter import AnalysisProvider
from risk_radar.presentation.renderer import SessionView, build_view

logger = logging.getLogger(__name__)


class SessionController:
    def __init__(self, provider: AnalysisProvider, state: SessionState | None = None) -> None:
        self.provider = provider
        self._state = state or initial_state()

    @property
    def state(self) -> SessionState:
        return self._state

    def dispatch(self, event: SessionEvent) -> SessionState:
        self._state = reduce(self._state, event)
        return self._state

    def select_region(self, code: RegionCode | str) -> SessionState:
        return self.dispatch(SelectRegion(code))

    def edit_text(self, text: str) -> SessionState:
        return self.dispatch(EditText(text))

    def load_file(self, file_name: str, data: bytes | str) -> SessionState:
        return self.dispatch(LoadFile(file_name, data))

    def toggle_flag(self, index: int) -> SessionState:
        return self.dispatch(ToggleFlag(index))

    def reset(self) -> SessionState:
        return self.dispatch(Reset())

    def submit(self) -> SessionState:
        # Raises ValidationError before anything changes when the draft is too short.
        analyzing = self.dispatch(Submit())
        region = get_region(analyzing.region_code)
        try:
            result = self.provider.analyze(analyzing.draft.text, region)
        except AnalysisError as exc:
            logger.error("Analysis failed [%s]: %s", exc.kind, exc)
            return self.dispatch(AnalysisFailed(GENERIC_FAILURE_NOTICE))
        except Exception:
            # Leave ANALYZING so the session is not locked, then surface the bug.
            self.dispatch(AnalysisFailed(GENERIC_FAILURE_NOTICE))
            raise
        return self.dispatch(AnalysisSucceeded(result))

    def view(self) -> SessionView:
        return build_view(self._state)
