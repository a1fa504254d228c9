# config/settings.py
import os
import sys
from typing import List
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from model.partition import Partition
from util.enums import DeviceClass, Environment


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(default=Environment.DEV.value, validation_alias="APP_ENV")
    ALLOWED_ORIGIN: str = Field(default="*", validation_alias="ALLOWED_ORIGIN")
    HOST: str = Field(default="127.0.0.1", validation_alias="HOST")
    PORT: int = Field(default=8000, validation_alias="PORT")

    # Key index store
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0", validation_alias="REDIS_URL"
    )

    # Blob store (any S3-compatible endpoint: R2, MinIO, AWS)
    BLOB_BUCKET: str = Field(..., validation_alias="BLOB_BUCKET")
    BLOB_ENDPOINT_URL: str | None = Field(
        default=None, validation_alias="BLOB_ENDPOINT_URL"
    )
    BLOB_REGION: str = Field(default="auto", validation_alias="BLOB_REGION")
    BLOB_ACCESS_KEY_ID: str | None = Field(
        default=None, validation_alias="BLOB_ACCESS_KEY_ID"
    )
    BLOB_SECRET_ACCESS_KEY: str | None = Field(
        default=None, validation_alias="BLOB_SECRET_ACCESS_KEY"
    )
    BLOB_STREAM_CHUNK_BYTES: int = Field(
        default=64 * 1024, validation_alias="BLOB_STREAM_CHUNK_BYTES"
    )

    # Partitions
    DESKTOP_INDEX_NAME: str = Field(
        default="PC_IMAGE_KEYS", validation_alias="DESKTOP_INDEX_NAME"
    )
    DESKTOP_PREFIX: str = Field(default="pc_img/", validation_alias="DESKTOP_PREFIX")
    MOBILE_INDEX_NAME: str = Field(
        default="MOBILE_IMAGE_KEYS", validation_alias="MOBILE_INDEX_NAME"
    )
    MOBILE_PREFIX: str = Field(default="mobile_img/", validation_alias="MOBILE_PREFIX")

    # Refresh schedule
    REFRESH_ENABLED: bool = Field(default=True, validation_alias="REFRESH_ENABLED")
    REFRESH_INTERVAL_SECONDS: int = Field(
        default=3600, gt=0, validation_alias="REFRESH_INTERVAL_SECONDS"
    )
    REFRESH_ON_STARTUP: bool = Field(
        default=True, validation_alias="REFRESH_ON_STARTUP"
    )

    # Response caching
    CACHE_MAX_AGE_SECONDS: int = Field(
        default=300, ge=0, validation_alias="CACHE_MAX_AGE_SECONDS"
    )

    # Logging knobs
    LOGGER_NAME: str = "random-wallpaper"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="app.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=50 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")

    def partitions(self) -> List[Partition]:
        return [
            Partition(
                device_class=DeviceClass.DESKTOP,
                index_name=self.DESKTOP_INDEX_NAME,
                prefix=self.DESKTOP_PREFIX,
            ),
            Partition(
                device_class=DeviceClass.MOBILE,
                index_name=self.MOBILE_INDEX_NAME,
                prefix=self.MOBILE_PREFIX,
            ),
        ]

    @property
    def cache_control(self) -> str:
        return f"public, max-age={self.CACHE_MAX_AGE_SECONDS}"


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
