from __future__ import annotations

from dataclasses import asdict

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from risk_radar.config import settings
from risk_radar.domain.errors import ValidationError
from risk_radar.domain.status import SYSTEM_STATUS, SYSTEM_STATUS_LINE
from risk_radar.domain.submission import SUPPORTED_UPLOAD_TYPES
from risk_radar.infra.groq_adapter import GroqAnalysisProvider
from risk_radar.infra.logger import setup_logger
from risk_radar.infra.report_client import ReportExportClient
from risk_radar.presentation.renderer import ResultView, SessionView
from risk_radar.services.session_service import SessionController


st.set_page_config(page_title="Legal Risk Radar", page_icon="⚖️", layout="wide")
setup_logger("risk_radar", settings.log_level)

# Streamlit markdown has no yellow; caution reads as orange.
ST_COLORS = {"green": "green", "yellow": "orange", "orange": "orange", "red": "red", "blue": "blue"}


def _controller() -> SessionController:
    if "controller" not in st.session_state:
        st.session_state.controller = SessionController(GroqAnalysisProvider())
    return st.session_state.controller


controller = _controller()


def _on_text_change() -> None:
    controller.edit_text(st.session_state.get("draft_text", ""))


def _on_reset() -> None:
    controller.reset()
    for key in ("draft_text", "loaded_file"):
        st.session_state.pop(key, None)
    st.session_state.upload_nonce = st.session_state.get("upload_nonce", 0) + 1


def _sync_uploaded_file(uploaded) -> None:
    if uploaded is None:
        return
    signature = (uploaded.name, uploaded.size)
    if st.session_state.get("loaded_file") == signature:
        return
    controller.load_file(uploaded.name, uploaded.getvalue())
    st.session_state.loaded_file = signature
    st.session_state.draft_text = controller.state.draft.text


def _render_status_banner() -> None:
    marks = "  ".join(
        f"{entry.region}: {'●' if entry.status == 'active' else '⟳'}" for entry in SYSTEM_STATUS
    )
    st.caption(f"🟢 LIVE LEGAL DB  {marks}  |  {SYSTEM_STATUS_LINE}")
    with st.expander("Environment status", expanded=False):
        st.write(
            {
                "APP_ENV": settings.app_env,
                "GROQ_CONFIGURED": settings.groq_configured(),
                "GROQ_MODEL": settings.groq_model,
                "REPORT_ENDPOINT": settings.report_endpoint_url,
            }
        )
        df = pd.DataFrame([asdict(entry) for entry in SYSTEM_STATUS])
        st.dataframe(df, use_container_width=True, hide_index=True)


def _render_region_selector(view: SessionView) -> None:
    st.header("1. Select Jurisdiction")
    for card in view.region_cards:
        st.button(
            f"{card.flag} {card.name} · {card.law_count} Laws Integrated",
            key=f"region_{card.code}",
            type="primary" if card.selected else "secondary",
            disabled=view.is_loading,
            use_container_width=True,
            on_click=controller.select_region,
            args=(card.code,),
        )
    if view.active_region_name:
        st.info(f"**Active Frameworks for {view.active_region_name}:**\n\n{', '.join(view.active_laws)}")


def _render_features() -> None:
    f1, f2, f3 = st.columns(3)
    with f1:
        st.markdown("#### 🌏 Multi-Region Logic")
        st.caption("Adapts analysis based on specific acts like PDPA (SG) or Contract Act 1872 (IN).")
    with f2:
        st.markdown("#### 🤖 Schema-Constrained LLM")
        st.caption("High-speed reasoning to identify subtle risks and unfair clauses in seconds.")
    with f3:
        st.markdown("#### 🛡️ Privacy First")
        st.caption("Contracts are processed via the configured API endpoint and never stored.")


def _render_contract_input(view: SessionView) -> None:
    st.subheader("2. Upload Contract")
    uploaded = st.file_uploader(
        "Upload text file",
        type=list(SUPPORTED_UPLOAD_TYPES),
        help="Supported: .txt, .md (Copy/Paste below for PDF/Word)",
        disabled=view.is_loading,
        key=f"upload_{st.session_state.get('upload_nonce', 0)}",
    )
    _sync_uploaded_file(uploaded)

    if "draft_text" not in st.session_state:
        st.session_state.draft_text = controller.state.draft.text
    st.text_area(
        "Or paste your contract text here...",
        key="draft_text",
        height=220,
        on_change=_on_text_change,
        disabled=view.is_loading,
    )

    view = controller.view()
    if view.file_label:
        st.success(f"📄 {view.file_label} loaded successfully")
    st.caption(f"{view.char_count} chars")

    if view.notice:
        st.error(view.notice)

    if st.button("Run Legal Risk Radar ⚡", type="primary", disabled=not view.submit_enabled, use_container_width=True):
        try:
            with st.spinner("Analyzing Laws..."):
                controller.submit()
        except ValidationError as exc:
            st.warning(str(exc))
            return
        st.rerun()


def _render_finding_detail(finding) -> None:
    with st.container(border=True):
        st.markdown("**LEGAL BASIS**")
        st.markdown(f"⚖️ {finding.law_violated}")
        st.markdown("**RISK ANALYSIS**")
        st.write(finding.explanation)
        st.markdown("**RECOMMENDED ACTION**")
        st.markdown(f'_"{finding.suggested_fix}"_')


def _render_result(result_view: ResultView) -> None:
    score_color = ST_COLORS[result_view.band_tone]

    st.header("Analysis Complete")
    st.caption(f"Processed against {result_view.statutes_count} local statutes")

    s1, s2 = st.columns([1, 2])
    with s1:
        st.markdown("RISK SCORE")
        st.markdown(f"## :{score_color}[{result_view.score_label}]")
        st.markdown(f"### :{score_color}[{result_view.rating}]")
    with s2:
        st.progress(result_view.gauge_fraction)
        st.subheader("Executive Summary")
        st.write(result_view.summary)

    left, right = st.columns(2)
    with left:
        st.subheader("✅ Compliant Points")
        for point in result_view.compliant_points:
            st.success(point)
    with right:
        st.subheader("⚠️ Critical Risks")
        if result_view.empty_message:
            st.success(result_view.empty_message)
        for item in result_view.preview:
            st.markdown(f"- {item.issue} :{ST_COLORS[item.tone]}[**{item.severity}**]")

    if result_view.findings:
        st.subheader(f"Detailed Findings ({len(result_view.findings)})")
        for finding in result_view.findings:
            marker = "▾" if finding.expanded else "▸"
            st.button(
                f"{marker} {finding.issue} · {finding.severity.upper()}",
                key=f"finding_{finding.index}",
                use_container_width=True,
                on_click=controller.toggle_flag,
                args=(finding.index,),
            )
            if finding.expanded:
                _render_finding_detail(finding)

    d1, d2 = st.columns(2)
    with d1:
        if st.button("📄 Download PDF Report", use_container_width=True):
            with st.spinner("Generating PDF..."):
                export = ReportExportClient().export(controller.state.result)
            if export.downloaded:
                st.download_button(
                    label="Save PDF",
                    data=export.content,
                    file_name=export.file_name,
                    mime="application/pdf",
                    use_container_width=True,
                )
            else:
                components.html("<script>window.parent.print();</script>", height=0)
    with d2:
        st.button("🔄 Analyze Another Contract", use_container_width=True, on_click=_on_reset)


st.title("⚖️ Legal Risk Radar")
st.caption(
    "AI-powered contract intelligence for cross-border operations. "
    "Instant compliance checks against local laws in **India, Singapore, UAE,** and more."
)
_render_status_banner()

view = controller.view()

with st.sidebar:
    _render_region_selector(view)

if view.result is not None:
    _render_result(view.result)
elif view.show_input:
    _render_contract_input(view)
elif view.show_features:
    st.info("Select a jurisdiction in the sidebar to begin.")
    _render_features()

st.divider()
st.caption(
    "Disclaimer: This tool provides automated analysis for informational purposes only and does not "
    "constitute legal advice. Always consult a qualified attorney for final contract review."
)
