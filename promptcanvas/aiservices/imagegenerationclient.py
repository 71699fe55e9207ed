from __future__ import annotations

from abc import ABC, abstractmethod


class GenerationError(RuntimeError):
    """Raised by image clients with a message fit to show the user."""


class GenerationInProgressError(GenerationError):
    """Raised when a client is asked to generate while a call is in flight."""


class ImageGenerationClient(ABC):
    """Abstract interface for an image generation client.

    Implementations must provide an asynchronous generation method
    used by the rest of the application.
    """

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Generate an image from a prompt and return its base64 payload.

        Should raise GenerationError when no image can be produced.
        """
