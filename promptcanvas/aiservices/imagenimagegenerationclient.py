# aiservices/imagenimagegenerationclient.py
from __future__ import annotations

import asyncio
import base64
import logging
from typing import Any, Optional

from google import genai
from google.genai import types

from .imagegenerationclient import (
    GenerationError,
    GenerationInProgressError,
    ImageGenerationClient,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL_ID = "imagen-4.0-generate-001"

NO_IMAGE_MESSAGE = "No image was generated. The response might have been blocked."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred during image generation."


class ImagenGenerationClient(ImageGenerationClient):
    """
    Generates a single square PNG per prompt with Google Imagen through
    the Gen AI SDK. The API key is handed in by the caller; the SDK client
    is only built on the first call so a bad key surfaces as a
    GenerationError like any other service failure.
    """

    def __init__(
        self,
        api_key: str,
        model_id: str = DEFAULT_MODEL_ID,
        genai_client: Optional[Any] = None,
    ) -> None:
        self._api_key = api_key
        self._model = model_id
        self._client = genai_client
        self._in_flight = asyncio.Lock()

    @property
    def model_id(self) -> str:
        return self._model

    # --- Generation -----------------------------------------------------------

    async def generate(self, prompt: str) -> str:
        if self._in_flight.locked():
            raise GenerationInProgressError("An image is already being generated.")

        async with self._in_flight:
            try:
                response = await self._sdk().aio.models.generate_images(
                    model=self._model,
                    prompt=prompt,
                    config=types.GenerateImagesConfig(
                        number_of_images=1,
                        output_mime_type="image/png",
                        aspect_ratio="1:1",
                    ),
                )
            except Exception as exc:
                logger.error("Error generating image with Gemini API: %s", exc, exc_info=True)
                message = str(exc).strip()
                if not message:
                    raise GenerationError(UNKNOWN_ERROR_MESSAGE) from exc
                raise GenerationError(f"API Error: {message}") from exc

        image_bytes = self._first_image_bytes(response)
        if not image_bytes:
            logger.error("Gemini API returned no image for model %s", self._model)
            raise GenerationError(NO_IMAGE_MESSAGE)

        return base64.b64encode(image_bytes).decode("ascii")

    # --- Helpers --------------------------------------------------------------

    def _sdk(self) -> Any:
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    @staticmethod
    def _first_image_bytes(response: Any) -> Optional[bytes]:
        generated = getattr(response, "generated_images", None) or []
        if not generated:
            return None
        image = getattr(generated[0], "image", None)
        return getattr(image, "image_bytes", None)
