from __future__ import annotations

from dataclasses import dataclass

from google.cloud import translate

from .base import TranslationError, TranslationResult


def _bcp47(lang: str) -> str:
    # The v3 API expects region subtags upper-cased, e.g. "en-US".
    parts = lang.split("-")
    if len(parts) == 2 and len(parts[1]) == 2:
        return f"{parts[0].lower()}-{parts[1].upper()}"
    return lang


@dataclass
class GoogleTranslateV3:
    project_id: str
    location: str = "global"
    credentials_path: str | None = None

    name: str = "google_v3"

    def _client(self) -> translate.TranslationServiceClient:
        if self.credentials_path:
            return translate.TranslationServiceClient.from_service_account_file(
                self.credentials_path
            )
        return translate.TranslationServiceClient()

    def translate(
        self,
        texts: list[str],
        source_lang: str | None,
        target_lang: str,
    ) -> list[TranslationResult]:
        if not texts:
            return []
        if not self.project_id:
            raise TranslationError("GCP project_id is required for Google Translate v3")

        client = self._client()
        request = {
            "parent": f"projects/{self.project_id}/locations/{self.location}",
            "contents": list(texts),
            "mime_type": "text/plain",
            "target_language_code": _bcp47(target_lang),
        }
        # Omitting the source code lets the service detect it.
        if source_lang:
            request["source_language_code"] = _bcp47(source_lang)

        response = client.translate_text(request=request)
        return [
            TranslationResult(text=t.translated_text, engine=self.name)
            for t in response.translations
        ]
