from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any

from dotenv import load_dotenv


load_dotenv()


def _to_secret_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _get_streamlit_secret(*keys: str) -> str:
    try:
        import streamlit as st
    except ImportError:
        return ""

    normalized: list[str] = []
    for key in keys:
        normalized.extend([key, key.lower(), key.upper()])

    try:
        for key in normalized:
            value = _to_secret_str(st.secrets.get(key))
            if value:
                return value
    except Exception:
        # st.secrets raises when no secrets.toml exists outside a running app.
        return ""

    section_aliases = {
        "groq": {
            "groq_api_key": ["api_key", "groq_api_key", "key"],
            "api_key": ["api_key", "groq_api_key", "key"],
            "groq_model": ["model", "groq_model"],
        },
        "report": {
            "report_endpoint_url": ["endpoint_url", "url", "report_endpoint_url"],
            "report_timeout_seconds": ["timeout_seconds", "timeout"],
        },
    }

    for section_name, alias_map in section_aliases.items():
        section_data = st.secrets.get(section_name)
        if not hasattr(section_data, "items"):
            continue
        nested = {str(k).lower(): _to_secret_str(v) for k, v in section_data.items()}
        for key in keys:
            for alias in alias_map.get(key.lower(), []):
                value = nested.get(alias.lower(), "")
                if value:
                    return value

    return ""


def _get_config_value(*keys: str, default: str = "") -> str:
    for key in keys:
        value = os.getenv(key, "").strip()
        if value:
            return value
    secret_value = _get_streamlit_secret(*keys)
    if secret_value:
        return secret_value
    return default


@dataclass(frozen=True)
class Settings:
    app_env: str
    groq_api_key: str
    groq_model: str
    groq_user_agent: str
    report_endpoint_url: str
    report_timeout_seconds: float
    log_level: str

    def groq_configured(self) -> bool:
        return bool(self.groq_api_key)


def load_settings() -> Settings:
    return Settings(
        app_env=_get_config_value("APP_ENV", default="dev"),
        groq_api_key=_get_config_value("GROQ_API_KEY", "API_KEY"),
        groq_model=_get_config_value("GROQ_MODEL", default="openai/gpt-oss-120b"),
        groq_user_agent=_get_config_value(
            "GROQ_USER_AGENT",
            default=(
                "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
                "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
            ),
        ),
        report_endpoint_url=_get_config_value(
            "REPORT_ENDPOINT_URL",
            default="http://localhost:8000/api/v1/generate-report",
        ),
        report_timeout_seconds=float(_get_config_value("REPORT_TIMEOUT_SECONDS", default="30") or 30),
        log_level=_get_config_value("LOG_LEVEL", default="INFO").upper(),
    )


settings = load_settings()
