from __future__ import annotations

import os
from dataclasses import dataclass


ENGINES = ("microsoft", "google_v3")
LANGUAGE_MATCH_MODES = ("contains", "prefix", "exact")
MISSING_LANGUAGE_POLICIES = ("translate", "reject")

DEFAULT_TRANSLATOR_URL = "https://api.microsofttranslator.com/v2/Http.svc/Translate"


@dataclass(frozen=True)
class Config:
    engine: str = "microsoft"

    translator_key: str | None = None
    translator_url: str = DEFAULT_TRANSLATOR_URL
    translator_region: str | None = None
    translator_timeout: float = 30.0

    gcp_project_id: str | None = None
    gcp_location: str = "global"
    gcp_credentials_path: str | None = None

    language_match: str = "contains"
    missing_language: str = "translate"

    host: str = "0.0.0.0"
    port: int = 7071
    log_level: str = "INFO"


def load_config() -> Config:
    def _choice(name: str, default: str, allowed: tuple[str, ...]) -> str:
        value = os.getenv(name, default).strip().lower()
        if value not in allowed:
            raise RuntimeError(f"{name} must be one of: {', '.join(allowed)}")
        return value

    def _number(name: str, default: str, cast):
        raw = os.getenv(name, default)
        try:
            return cast(raw)
        except ValueError as exc:
            raise RuntimeError(f"{name} must be a number, got {raw!r}") from exc

    engine = _choice("SKILL_ENGINE", "microsoft", ENGINES)
    translator_key = os.getenv("TRANSLATOR_KEY")
    if engine == "microsoft" and not translator_key:
        raise RuntimeError("Missing required env var: TRANSLATOR_KEY")
    gcp_project_id = os.getenv("GCP_PROJECT_ID")
    if engine == "google_v3" and not gcp_project_id:
        raise RuntimeError("Missing required env var: GCP_PROJECT_ID")

    cfg = Config(
        engine=engine,
        translator_key=translator_key,
        translator_url=os.getenv("TRANSLATOR_URL", DEFAULT_TRANSLATOR_URL),
        translator_region=os.getenv("TRANSLATOR_REGION") or None,
        translator_timeout=_number("SKILL_TRANSLATOR_TIMEOUT", "30", float),
        gcp_project_id=gcp_project_id,
        gcp_location=os.getenv("GCP_LOCATION", "global"),
        gcp_credentials_path=os.getenv("GCP_CREDENTIALS_PATH")
        or os.getenv("GCP_CREDENTIALS_JSON"),
        language_match=_choice("SKILL_LANGUAGE_MATCH", "contains", LANGUAGE_MATCH_MODES),
        missing_language=_choice(
            "SKILL_MISSING_LANGUAGE", "translate", MISSING_LANGUAGE_POLICIES
        ),
        host=os.getenv("SKILL_HOST", "0.0.0.0"),
        port=_number("SKILL_PORT", "7071", int),
        log_level=os.getenv("SKILL_LOG_LEVEL", "INFO").upper(),
    )
    return cfg
