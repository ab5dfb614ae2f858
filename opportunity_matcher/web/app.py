"""FastAPI application factory."""

import json
import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from opportunity_matcher.config import AppConfig, load_config, validate_config
from opportunity_matcher.envelope import handle_match_request
from opportunity_matcher.pipeline import MatchingPipeline, build_pipeline

logger = logging.getLogger("opportunity_matcher.web")


def create_app(config: Optional[AppConfig] = None, pipeline: Optional[MatchingPipeline] = None) -> FastAPI:
    if pipeline is None:
        if config is None:
            config = load_config(os.environ.get("OPPORTUNITY_MATCHER_CONFIG", "config.yaml"))
        for w in validate_config(config):
            logger.warning("Config: %s", w)
        pipeline = build_pipeline(config)

    app = FastAPI(title="Opportunity Matcher")
    app.state.pipeline = pipeline

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Client-Info", "Apikey"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post("/match")
    async def match(request: Request):
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            payload = None

        status_code, body = await run_in_threadpool(handle_match_request, request.app.state.pipeline, payload)
        return JSONResponse(body, status_code=status_code)

    return app
