import pytest

from conftest import CONTRACT_TEXT, StubProvider
from risk_radar.domain.errors import GENERIC_FAILURE_NOTICE, ParseError, TransportError, ValidationError
from risk_radar.domain.regions import RegionCode
from risk_radar.domain.states import SessionPhase
from risk_radar.presentation.renderer import RiskBand
from risk_radar.services.session_service import SessionController


def test_singapore_scenario_renders_danger_result(sg_result):
    provider = StubProvider(result=sg_result)
    controller = SessionController(provider)

    controller.select_region("SG")
    controller.edit_text(CONTRACT_TEXT)
    assert len(CONTRACT_TEXT) == 60
    state = controller.submit()

    assert state.phase == SessionPhase.RESULT_SHOWN
    text, region = provider.calls[0]
    assert text == CONTRACT_TEXT
    assert region.code == RegionCode.SINGAPORE

    view = controller.view().result
    assert view.score_label == "85/100"
    assert view.band == RiskBand.DANGER
    assert len(view.findings) == 2
    assert view.compliant_points == ["Clear termination clause"]


def test_short_draft_never_reaches_provider_and_leaves_state(sg_result):
    provider = StubProvider(result=sg_result)
    controller = SessionController(provider)
    controller.select_region("SG")
    controller.edit_text("x" * 49)
    before = controller.state

    with pytest.raises(ValidationError):
        controller.submit()

    assert provider.calls == []
    assert controller.state == before


def test_transport_failure_keeps_draft_and_shows_generic_notice():
    provider = StubProvider(error=TransportError("connection reset"))
    controller = SessionController(provider)
    controller.select_region("SG")
    controller.edit_text(CONTRACT_TEXT)

    state = controller.submit()

    assert len(provider.calls) == 1
    assert state.phase == SessionPhase.REGION_SELECTED
    assert state.draft.text == CONTRACT_TEXT
    assert state.result is None
    assert state.notice == GENERIC_FAILURE_NOTICE
    assert controller.view().result is None


def test_every_failure_kind_collapses_to_same_notice():
    for error in (TransportError("a"), ParseError("b")):
        controller = SessionController(StubProvider(error=error))
        controller.select_region("IN")
        controller.edit_text(CONTRACT_TEXT)
        assert controller.submit().notice == GENERIC_FAILURE_NOTICE


def test_retry_after_failure_succeeds_without_reentering_text(sg_result):
    provider = StubProvider(error=TransportError("timeout"))
    controller = SessionController(provider)
    controller.select_region("SG")
    controller.edit_text(CONTRACT_TEXT)
    controller.submit()

    provider.error = None
    provider.result = sg_result
    state = controller.submit()

    assert state.phase == SessionPhase.RESULT_SHOWN
    assert state.notice is None
    assert [call[0] for call in provider.calls] == [CONTRACT_TEXT, CONTRACT_TEXT]


def test_unexpected_provider_bug_does_not_lock_the_session():
    controller = SessionController(StubProvider(error=KeyError("bug")))
    controller.select_region("SG")
    controller.edit_text(CONTRACT_TEXT)

    with pytest.raises(KeyError):
        controller.submit()
    assert controller.state.phase == SessionPhase.REGION_SELECTED


def test_reset_after_result_clears_everything(sg_result):
    controller = SessionController(StubProvider(result=sg_result))
    controller.select_region("SG")
    controller.edit_text(CONTRACT_TEXT)
    controller.submit()

    state = controller.reset()

    assert state.phase == SessionPhase.NO_REGION
    assert state.result is None
    assert controller.view().show_features
