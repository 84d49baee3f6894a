from __future__ import annotations

from dataclasses import dataclass

from risk_radar.domain.errors import ValidationError

MIN_SUBMIT_CHARS = 50
MIN_ENABLE_CHARS = 20
SUPPORTED_UPLOAD_TYPES: tuple[str, ...] = ("txt", "md")


@dataclass(frozen=True)
class ContractDraft:
    text: str = ""
    file_name: str | None = None

    @property
    def char_count(self) -> int:
        return len(self.text)


def set_text(draft: ContractDraft, candidate: str) -> ContractDraft:
    return ContractDraft(text=candidate, file_name=None)


def load_from_file(draft: ContractDraft, file_name: str, data: bytes | str) -> ContractDraft:
    """Install an uploaded file's content as the draft.

    Content is read as plain text only. Binary formats are not extracted;
    undecodable bytes are replaced rather than rejected.
    """
    text = data if isinstance(data, str) else data.decode("utf-8", errors="replace")
    return ContractDraft(text=text, file_name=file_name)


def submit_enabled(text: str, is_loading: bool = False) -> bool:
    return not is_loading and len(text) >= MIN_ENABLE_CHARS


def validate_submission(text: str) -> str:
    if len(text.strip()) < MIN_SUBMIT_CHARS:
        raise ValidationError("Please enter enough contract text to analyze.")
    return text
