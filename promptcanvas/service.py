"""Session state for the prompt form and the result panel."""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache

from .aiservices.imagegenerationclient import GenerationError, ImageGenerationClient
from .aiservices.imagenimagegenerationclient import ImagenGenerationClient
from .config import get_settings
from .schemas import DATA_URI_PREFIX, Failure, Idle, Loading, Success, UIState, View

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."
CANCELLED_MESSAGE = "Image generation was cancelled. Please try again."


class GenerationSession:
    """Owns the prompt and the UI state, and drives the image client."""

    def __init__(self, client: ImageGenerationClient) -> None:
        self._client = client
        self._prompt = ""
        self._state: UIState = Idle()

    @property
    def prompt(self) -> str:
        return self._prompt

    @property
    def state(self) -> UIState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------
    async def submit(self, prompt: str) -> bool:
        """Start a generation for ``prompt``.

        Returns False without touching any state when the prompt is blank
        or a generation is already running.
        """
        if not prompt.strip() or self.is_loading:
            return False

        self._prompt = prompt
        self._transition(Loading())

        try:
            image = await self._client.generate(prompt)
        except asyncio.CancelledError:
            logger.warning("Image generation cancelled for prompt '%s'", prompt)
            self._transition(Failure(message=CANCELLED_MESSAGE))
            raise
        except GenerationError as exc:
            self._transition(Failure(message=str(exc)))
        except Exception:
            logger.exception("Image generation failed for prompt '%s'", prompt)
            self._transition(Failure(message=UNEXPECTED_ERROR_MESSAGE))
        else:
            self._transition(Success(image=image))
        return True

    def _transition(self, state: UIState) -> None:
        logger.debug("Session state %s -> %s", self._state.kind, state.kind)
        self._state = state


def render_view(state: UIState) -> View:
    """Map a UI state to the single view the result panel shows."""
    if isinstance(state, Loading):
        return View(name="progress")
    if isinstance(state, Failure):
        return View(name="error", message=state.message)
    if isinstance(state, Success):
        return View(name="image", image_src=DATA_URI_PREFIX + state.image)
    return View(name="placeholder")


@lru_cache
def get_image_client() -> ImageGenerationClient:
    settings = get_settings()
    return ImagenGenerationClient(
        api_key=settings.api_key.get_secret_value(),
        model_id=settings.image_model_id,
    )


@lru_cache
def get_generation_session() -> GenerationSession:
    return GenerationSession(get_image_client())
