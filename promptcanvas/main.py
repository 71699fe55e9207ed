"""FastAPI entry point serving the PromptCanvas page and its JSON API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .config import Settings, get_settings
from .schemas import GenerateRequest, GenerationStateResponse
from .service import GenerationSession, get_generation_session, render_view

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Serving image model %s", settings.image_model_id)
    yield


app = FastAPI(title="PromptCanvas", version="1.0.0", lifespan=lifespan)


def _state_response(session: GenerationSession, accepted: bool = False) -> GenerationStateResponse:
    return GenerationStateResponse(
        prompt=session.prompt,
        state=session.state,
        view=render_view(session.state),
        accepted=accepted,
    )


def _render_page(request: Request, session: GenerationSession, settings: Settings) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": settings.app_title,
            "prompt": session.prompt,
            "is_loading": session.is_loading,
            "view": render_view(session.state),
        },
    )


@app.get("/health", summary="Health Check Endpoint")
async def healthcheck(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "imageModel": settings.image_model_id,
    }


@app.get("/", response_class=HTMLResponse, summary="Render the prompt form and result panel")
async def index(
    request: Request,
    session: GenerationSession = Depends(get_generation_session),
    settings: Settings = Depends(get_settings),
):
    return _render_page(request, session, settings)


@app.post("/", response_class=HTMLResponse, summary="Submit the prompt form")
async def submit_form(
    request: Request,
    prompt: str = Form(""),
    session: GenerationSession = Depends(get_generation_session),
    settings: Settings = Depends(get_settings),
):
    await session.submit(prompt)
    return _render_page(request, session, settings)


@app.get("/api/state",
         response_model=GenerationStateResponse,
         summary="Current prompt and generation state")
async def current_state(
    session: GenerationSession = Depends(get_generation_session),
):
    return _state_response(session)


@app.post("/api/generate",
          response_model=GenerationStateResponse,
          summary="Generate an image for a prompt")
async def generate(
    payload: GenerateRequest,
    session: GenerationSession = Depends(get_generation_session),
):
    accepted = await session.submit(payload.prompt)
    if not accepted:
        logger.debug("Ignored generate request (blank prompt or generation in flight)")
    return _state_response(session, accepted=accepted)
