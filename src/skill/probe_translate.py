from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import load_config
from .engines.factory import build_engine
from .handler import EnrichmentHandler, SkillError
from .logging import configure_logging
from .matching import get_predicate


log = logging.getLogger("probe")


def _build_payload(args: argparse.Namespace) -> object:
    if args.request:
        try:
            raw = (
                sys.stdin.read() if args.request == "-" else Path(args.request).read_text("utf-8")
            )
        except OSError as exc:
            raise SystemExit(f"cannot read request {args.request}: {exc}") from exc
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SystemExit(f"request is not valid JSON: {exc}") from exc
    data = {"text": args.text}
    if args.language is not None:
        data["language"] = args.language
    return {"values": [{"recordId": args.record_id, "data": data}]}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Run one enrichment request through the configured engine"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--request", help="Path to a request JSON file, or - for stdin")
    source.add_argument("--text", help="Text of a single ad-hoc record")
    parser.add_argument("--language", default=None, help="Language tag for --text")
    parser.add_argument("--record-id", default="probe-1")
    args = parser.parse_args(argv)

    cfg = load_config()
    configure_logging(cfg.log_level)

    handler = EnrichmentHandler(
        engine=build_engine(cfg),
        is_english=get_predicate(cfg.language_match),
        missing_language=cfg.missing_language,
    )
    try:
        response = handler.handle(_build_payload(args))
    except SkillError as exc:
        log.error("request failed (%s): %s", exc.status_code, exc)
        raise SystemExit(2) from exc

    print(json.dumps(response.to_wire(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
