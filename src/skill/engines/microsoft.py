from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

import requests
from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring

from .base import TranslationError, TranslationResult


log = logging.getLogger("skill.engines.microsoft")

SERIALIZATION_NS = "http://schemas.microsoft.com/2003/10/Serialization/"


def unwrap_string_envelope(body: str) -> str:
    """Return the plain text held in a serialized ``<string>`` element."""
    try:
        root = fromstring(body)
    except (ParseError, DefusedXmlException) as exc:
        raise TranslationError(f"unparseable translator response: {body[:200]!r}") from exc
    if root.tag not in ("string", f"{{{SERIALIZATION_NS}}}string"):
        raise TranslationError(f"unexpected translator response element: {root.tag}")
    return root.text or ""


@dataclass
class MicrosoftTranslator:
    api_url: str
    subscription_key: str
    # When unset each worker thread gets its own requests.Session.
    session: requests.Session | None = None
    region: str | None = None
    timeout: float = 30.0

    name: str = "microsoft"
    _local: threading.local = field(
        default_factory=threading.local, init=False, repr=False, compare=False
    )

    def _session(self) -> requests.Session:
        if self.session is not None:
            return self.session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    def _headers(self) -> dict[str, str]:
        headers = {"Ocp-Apim-Subscription-Key": self.subscription_key}
        if self.region:
            headers["Ocp-Apim-Subscription-Region"] = self.region
        return headers

    def _translate_one(self, text: str, source_lang: str | None, target_lang: str) -> str:
        params = {"text": text, "to": target_lang, "contentType": "text/plain"}
        if source_lang:
            params["from"] = source_lang
        try:
            resp = self._session().get(
                self.api_url, params=params, headers=self._headers(), timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise TranslationError(f"translator request failed: {exc}") from exc
        if resp.status_code >= 400:
            raise TranslationError(
                f"translator returned HTTP {resp.status_code}: {resp.text[:200]}"
            )
        return unwrap_string_envelope(resp.text)

    def translate(
        self, texts: list[str], source_lang: str | None, target_lang: str
    ) -> list[TranslationResult]:
        if not texts:
            return []
        if not self.subscription_key:
            raise TranslationError("translator subscription key is required")

        results: list[TranslationResult] = []
        for text in texts:
            translated = self._translate_one(text, source_lang, target_lang)
            log.debug("translated %s chars to %s", len(text), target_lang)
            results.append(TranslationResult(text=translated, engine=self.name))
        return results
