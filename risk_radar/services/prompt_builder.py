from __future__ import annotations

from risk_radar.domain.regions import RegionConfig

MAX_CONTRACT_CHARS = 30_000
TRUNCATION_NOTICE = "... (Text truncated for analysis: only the first 30,000 characters were provided)"


def truncate_contract(contract_text: str, limit: int = MAX_CONTRACT_CHARS) -> tuple[str, bool]:
    if len(contract_text) <= limit:
        return contract_text, False
    return contract_text[:limit], True


def build_prompt(contract_text: str, region: RegionConfig) -> str:
    body, truncated = truncate_contract(contract_text)
    laws = "\n".join(f"- {law}" for law in region.laws)
    tail = f"\n{TRUNCATION_NOTICE}" if truncated else ""

    return (
        f"Role: You are a senior legal compliance AI specialized in {region.name} law.\n"
        "Context: The user has uploaded a contract for risk analysis.\n\n"
        f"Applicable Legal Framework for {region.name}:\n"
        f"{laws}\n\n"
        "Task:\n"
        f"Analyze the following contract text strictly against {region.name} laws.\n"
        "Identify red flags, critical omissions (like missing data protection clauses "
        "required by local law), and unfair terms.\n"
        "Assign a risk score from 0 (Safe) to 100 (Extremely Risky).\n\n"
        "Contract Text:\n"
        f'"""\n{body}\n"""{tail}\n\n'
        "Output Format:\n"
        "Return strictly JSON matching the specified schema."
    )
