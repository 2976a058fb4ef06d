from functools import lru_cache
from typing import Literal

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        protected_namespaces=(),
    )

    env: Literal["local", "prod", "test"] = Field(default="local", alias="ENV")
    debug: bool = Field(default=True, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    s3_endpoint: HttpUrl | None = Field(default=None, alias="S3_ENDPOINT_URL")
    s3_region: str = Field(default="us-east-1", alias="S3_REGION")
    s3_bucket_uploads: str = Field(default="uploads", alias="S3_BUCKET_UPLOADS", min_length=1)

    upload_prefix: str = Field(default="uploads", alias="UPLOAD_PREFIX")
    presign_expires_seconds: int = Field(default=900, alias="PRESIGN_EXPIRES_SECONDS", gt=0)


@lru_cache
def get_settings() -> Settings:
    return Settings()
