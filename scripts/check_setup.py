from __future__ import annotations

import json
import os
import ssl
from pathlib import Path
from urllib import request, error


def load_env(path: str = ".env") -> dict[str, str]:
    env: dict[str, str] = {}
    p = Path(path)
    if not p.exists():
        return env
    for line in p.read_text().splitlines():
        s = line.strip()
        if not s or s.startswith("#") or "=" not in s:
            continue
        k, v = s.split("=", 1)
        env[k.strip()] = v.strip().strip('"').strip("'")
    return env


def pick(env: dict[str, str], *keys: str, default: str = "") -> str:
    for key in keys:
        value = os.getenv(key) or env.get(key)
        if value:
            return value
    return default


def probe(url: str, headers: dict[str, str] | None = None, method: str = "GET", body: bytes | None = None) -> tuple[int | None, str]:
    ctx = ssl.create_default_context()
    req = request.Request(url, data=body, headers=headers or {}, method=method)
    try:
        with request.urlopen(req, timeout=20, context=ctx) as resp:
            return resp.status, resp.read().decode("utf-8", "ignore")[:200]
    except error.HTTPError as exc:
        return exc.code, exc.read().decode("utf-8", "ignore")[:200]
    except (error.URLError, OSError) as exc:
        return None, str(exc)


def main() -> None:
    env = load_env()
    groq_key = pick(env, "GROQ_API_KEY", "API_KEY")
    model = pick(env, "GROQ_MODEL", default="openai/gpt-oss-120b")
    report_url = pick(env, "REPORT_ENDPOINT_URL", default="http://localhost:8000/api/v1/generate-report")

    print("== ENV VALIDATION ==")
    print(json.dumps({
        "GROQ_KEY_PRESENT": bool(groq_key),
        "GROQ_MODEL": model,
        "REPORT_ENDPOINT_URL": report_url,
    }, indent=2))

    print("\n== CONNECTIVITY CHECKS ==")
    if groq_key:
        status, detail = probe(
            f"https://api.groq.com/openai/v1/models/{model}",
            headers={"Authorization": f"Bearer {groq_key}"},
        )
        print(f"groq_model: status={status}")
        if status is None or status >= 400:
            print(f"  detail={detail}")
    else:
        print("groq_model: skipped (no GROQ_API_KEY); analysis will fail with a configuration error")

    status, detail = probe(
        report_url,
        headers={"Content-Type": "application/json"},
        method="POST",
        body=json.dumps({"risk_score": 0, "summary": "", "red_flags": [], "timestamp": ""}).encode("utf-8"),
    )
    print(f"report_endpoint: status={status}")
    if status is None or status >= 400:
        print("  note=PDF export will fall back to the browser print dialog.")


if __name__ == "__main__":
    main()
