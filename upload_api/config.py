import os
from pydantic import BaseModel, ConfigDict
from dotenv import load_dotenv
from .services.allowlist import DEFAULT_EXTENSIONS

MIB = 1024 * 1024
PLAIN_MAX_UPLOAD_SIZE = 10 * MIB
API_MAX_UPLOAD_SIZE = 5 * MIB
APP_VERSION = "1.0.2"

# body ceiling per app variant
VARIANT_LIMITS = {
    "plain": PLAIN_MAX_UPLOAD_SIZE,
    "api": API_MAX_UPLOAD_SIZE,
}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_upload_size: int = API_MAX_UPLOAD_SIZE
    upload_dir: str = "./uploads"
    allowed_extensions: frozenset[str] = DEFAULT_EXTENSIONS
    field_name: str = "file"
    host: str = "0.0.0.0"
    port: int = 8080
    app_version: str = APP_VERSION
    trusted_proxies: tuple[str, ...] = ("127.0.0.1",)

    @property
    def max_upload_mb(self) -> int:
        return self.max_upload_size // MIB


def load_settings(variant: str = "api") -> Settings:
    """Build the process-wide settings for one app variant.

    Only the deployment knobs (UPLOAD_DIR, PORT) come from the environment or
    a local .env file; the ceiling, allowlist and version are fixed.
    """
    load_dotenv()
    try:
        limit = VARIANT_LIMITS[variant]
    except KeyError:
        raise ValueError(f"unknown variant: {variant!r}") from None
    return Settings(
        max_upload_size=limit,
        upload_dir=os.getenv("UPLOAD_DIR", "./uploads"),
        port=int(os.getenv("PORT", "8080")),
    )
