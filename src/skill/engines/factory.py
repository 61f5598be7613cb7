from __future__ import annotations

import requests

from ..config import Config
from .base import TranslationEngine
from .google_v3 import GoogleTranslateV3
from .microsoft import MicrosoftTranslator


def build_engine(cfg: Config, session: requests.Session | None = None) -> TranslationEngine:
    if cfg.engine == "microsoft":
        if not cfg.translator_key:
            raise RuntimeError("TRANSLATOR_KEY is required for the microsoft engine")
        return MicrosoftTranslator(
            api_url=cfg.translator_url,
            subscription_key=cfg.translator_key,
            session=session,
            region=cfg.translator_region,
            timeout=cfg.translator_timeout,
        )
    if cfg.engine == "google_v3":
        if not cfg.gcp_project_id:
            raise RuntimeError("GCP_PROJECT_ID is required for the google_v3 engine")
        return GoogleTranslateV3(
            project_id=cfg.gcp_project_id,
            location=cfg.gcp_location,
            credentials_path=cfg.gcp_credentials_path,
        )
    raise RuntimeError(f"unknown translation engine: {cfg.engine}")
