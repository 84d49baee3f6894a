from __future__ import annotations

import logging

from risk_radar.domain.states import ALLOWED_TRANSITIONS, SessionPhase

logger = logging.getLogger(__name__)


class InvalidTransitionError(ValueError):
    pass


class StateMachine:
    def transition(self, current: SessionPhase, target: SessionPhase) -> SessionPhase:
        allowed = ALLOWED_TRANSITIONS.get(current, set())
        if target not in allowed:
            raise InvalidTransitionError(f"Invalid transition {current.value} -> {target.value}")
        logger.debug("Session transition %s -> %s", current.value, target.value)
        return target
