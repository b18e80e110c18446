import os
from typing import List


def _csv(name: str, default: List[str] | None = None) -> List[str]:
    raw = os.getenv(name, "")
    items = [x.strip() for x in raw.split(",") if x.strip()]
    return items if items else list(default or [])


class Settings:
    # Server
    HOST: str = os.getenv("BLOG_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("BLOG_PORT", "8080"))
    LOG_LEVEL: str = os.getenv("BLOG_LOG_LEVEL", "info").lower()

    # Passed to TrustedHostMiddleware
    ALLOWED_HOSTS: List[str] = _csv("BLOG_ALLOWED_HOSTS", default=["*"])


settings = Settings()
