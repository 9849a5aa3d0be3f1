from decimal import Decimal

from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Read env from process + optionally from .env
    model_config = SettingsConfigDict(
        env_file=(".env",),
        extra="ignore",
        case_sensitive=False,
    )

    # App
    ENVIRONMENT: str = Field(default="local", validation_alias=AliasChoices("ENVIRONMENT", "environment"))
    APP_NAME: str = Field(default="taxengine", validation_alias=AliasChoices("APP_NAME", "app_name"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))
    DEBUG: bool = Field(default=False, validation_alias=AliasChoices("DEBUG", "debug"))

    # GSTIN check-digit verification is off unless explicitly enabled
    VERIFY_GSTIN_CHECKSUM: bool = Field(
        default=False,
        validation_alias=AliasChoices("VERIFY_GSTIN_CHECKSUM", "verify_gstin_checksum"),
    )

    # GSTR-1: unregistered invoices at or above this value go to B2CL
    B2CL_THRESHOLD: Decimal = Field(
        default=Decimal("250000"),
        validation_alias=AliasChoices("B2CL_THRESHOLD", "b2cl_threshold"),
    )


settings = Settings()
