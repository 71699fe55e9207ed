"""Pydantic models shared by the session and the FastAPI endpoints."""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, computed_field

DATA_URI_PREFIX = "data:image/png;base64,"


# ---- UI state: exactly one of these at a time ----
class Idle(BaseModel):
    kind: Literal["idle"] = "idle"


class Loading(BaseModel):
    kind: Literal["loading"] = "loading"


class Success(BaseModel):
    kind: Literal["success"] = "success"
    image: str = Field(..., description="Base64-encoded PNG payload")

    @computed_field  # type: ignore[misc]
    @property
    def image_src(self) -> str:
        return DATA_URI_PREFIX + self.image


class Failure(BaseModel):
    kind: Literal["failure"] = "failure"
    message: str = Field(..., description="Human-readable reason the generation failed")


UIState = Annotated[Union[Idle, Loading, Success, Failure], Field(discriminator="kind")]
# ---------------------------------------------------


class View(BaseModel):
    name: Literal["placeholder", "progress", "error", "image"]
    image_src: Optional[str] = None
    message: Optional[str] = None


class GenerateRequest(BaseModel):
    prompt: str = Field(..., description="Text prompt for image generation")


class GenerationStateResponse(BaseModel):
    prompt: str = Field(..., description="Most recently submitted prompt")
    state: UIState
    view: View
    accepted: bool = Field(
        default=False,
        description="Whether the request started a generation",
    )
