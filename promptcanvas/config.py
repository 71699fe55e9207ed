from functools import lru_cache
from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the PromptCanvas web app."""

    #----------------------------------------------------------
    # External API settings
    #----------------------------------------------------------
    api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("PROMPTCANVAS_API_KEY", "API_KEY"),
        description="API key for authenticating with the Google Gen AI image service.",
    )

    image_model_id: str = Field(
        default="imagen-4.0-generate-001",
        description="Identifier of the hosted image generation model.",
    )

    #----------------------------------------------------------
    # Application settings
    #----------------------------------------------------------
    app_title: str = Field(
        default="AI Image Generator",
        description="Heading shown on the page and used as the API title.",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level applied at startup.",
    )

    model_config = SettingsConfigDict(
        env_prefix="PROMPTCANVAS_",
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
