from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .engines.base import TranslationEngine
from .matching import LanguagePredicate, contains_english
from .records import EnrichmentResponse, InputData, InputRecord, OutputData, OutputRecord


log = logging.getLogger("skill.handler")

TARGET_LANGUAGE = "en-us"


class SkillError(RuntimeError):
    status_code = 500


class MalformedRequest(SkillError):
    status_code = 400


class MissingRecordId(SkillError):
    status_code = 400


class TranslationFailure(SkillError):
    status_code = 502


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _record_id(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def parse_request(payload: Any) -> InputRecord:
    """Validate an enrichment batch and return its first record.

    Checks run in order and the first failure is raised. Records after the
    first are not inspected.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("values"), list):
        raise MalformedRequest("could not find values array")

    values = payload["values"]
    first = values[0] if values else None
    data = first.get("data") if isinstance(first, dict) else None
    if not isinstance(data, dict) or not data:
        raise MalformedRequest("could not find valid records in values array")

    record_id = _record_id(first.get("recordId"))
    if record_id is None:
        raise MissingRecordId("recordId cannot be null")

    language = data.get("language")
    return InputRecord(
        record_id=record_id,
        data=InputData(
            text=_as_text(data.get("text")),
            language=None if language is None else _as_text(language),
        ),
    )


@dataclass
class EnrichmentHandler:
    engine: TranslationEngine
    is_english: LanguagePredicate = contains_english
    missing_language: str = "translate"

    def _needs_translation(self, record: InputRecord) -> bool:
        language = record.data.language
        if language is None:
            if self.missing_language == "reject":
                raise MalformedRequest("language is required")
            return True
        return not self.is_english(language)

    def _translate(self, record: InputRecord) -> str:
        try:
            results = self.engine.translate([record.data.text], None, TARGET_LANGUAGE)
        except Exception as exc:
            log.error(
                "translation failed record=%s engine=%s: %s",
                record.record_id,
                self.engine.name,
                exc,
            )
            raise TranslationFailure(f"translation failed: {exc}") from exc
        if len(results) != 1:
            raise TranslationFailure(
                f"translation failed: expected 1 result, got {len(results)}"
            )
        return results[0].text

    def handle(self, payload: Any) -> EnrichmentResponse:
        record = parse_request(payload)
        extra = len(payload["values"]) - 1
        if extra:
            log.debug("ignoring %s extra record(s) after %s", extra, record.record_id)

        if self._needs_translation(record):
            log.info(
                "translate record=%s language=%s engine=%s",
                record.record_id,
                record.data.language,
                self.engine.name,
            )
            text = self._translate(record)
        else:
            log.info("passthrough record=%s language=%s", record.record_id, record.data.language)
            text = record.data.text

        return EnrichmentResponse(
            values=[OutputRecord(record_id=record.record_id, data=OutputData(text=text))]
        )
