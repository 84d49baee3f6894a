from __future__ import annotations

from enum import Enum


class SessionPhase(str, Enum):
    NO_REGION = "NO_REGION"
    REGION_SELECTED = "REGION_SELECTED"
    ANALYZING = "ANALYZING"
    RESULT_SHOWN = "RESULT_SHOWN"


ALLOWED_TRANSITIONS: dict[SessionPhase, set[SessionPhase]] = {
    SessionPhase.NO_REGION: {SessionPhase.REGION_SELECTED},
    SessionPhase.REGION_SELECTED: {
        SessionPhase.REGION_SELECTED,
        SessionPhase.ANALYZING,
        SessionPhase.NO_REGION,
    },
    SessionPhase.ANALYZING: {SessionPhase.RESULT_SHOWN, SessionPhase.REGION_SELECTED},
    SessionPhase.RESULT_SHOWN: {SessionPhase.REGION_SELECTED, SessionPhase.NO_REGION},
}
