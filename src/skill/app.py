from __future__ import annotations

import json
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from .config import Config, load_config
from .engines.base import TranslationEngine
from .engines.factory import build_engine
from .handler import EnrichmentHandler, MalformedRequest, SkillError
from .logging import configure_logging
from .matching import get_predicate
from .records import EnrichmentResponse


log = logging.getLogger("skill")


def create_app(cfg: Config, engine: TranslationEngine | None = None) -> FastAPI:
    handler = EnrichmentHandler(
        engine=engine or build_engine(cfg),
        is_english=get_predicate(cfg.language_match),
        missing_language=cfg.missing_language,
    )

    app = FastAPI(title="Translation enrichment skill")
    app.state.handler = handler

    @app.exception_handler(SkillError)
    async def _skill_error(request: Request, exc: SkillError) -> PlainTextResponse:
        if exc.status_code >= 500:
            log.error("%s %s failed: %s", request.method, request.url.path, exc)
        else:
            log.warning("%s %s rejected: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=exc.status_code)

    @app.post("/api/Translate", response_model=EnrichmentResponse)
    async def translate(request: Request) -> EnrichmentResponse:
        body = await request.body()
        try:
            payload = json.loads(body) if body else None
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedRequest("could not find values array") from exc
        return await run_in_threadpool(handler.handle, payload)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "engine": handler.engine.name}

    return app


def main() -> None:
    cfg = load_config()
    configure_logging(cfg.log_level)

    log.info("starting translation skill on %s:%s", cfg.host, cfg.port)
    log.info(
        "engine=%s language_match=%s missing_language=%s",
        cfg.engine,
        cfg.language_match,
        cfg.missing_language,
    )
    uvicorn.run(create_app(cfg), host=cfg.host, port=cfg.port, log_config=None)


if __name__ == "__main__":
    main()
