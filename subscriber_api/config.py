# subscriber_api/config.py
"""
Environment-driven settings.

A ``.env`` file in the working directory is loaded first, so local
overrides don't need to be exported in the shell.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_MONGO_URI = "mongodb://localhost:27017/subscribers"
DEFAULT_DB_NAME = "subscribers"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    port: int = 4000
    host: str = "0.0.0.0"
    mongo_uri: str = DEFAULT_MONGO_URI
    mongo_db_name: Optional[str] = None
    public_host: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    expose_error_details: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(find_dotenv(usecwd=True))

        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            port=int(os.getenv("PORT", "4000")),
            host=os.getenv("HOST", "0.0.0.0"),
            mongo_uri=os.getenv("MONGO_URI") or DEFAULT_MONGO_URI,
            mongo_db_name=os.getenv("MONGO_DB_NAME") or None,
            public_host=os.getenv("VERCEL_URL") or None,
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            expose_error_details=_as_bool(os.getenv("EXPOSE_ERROR_DETAILS", "true")),
        )

    @property
    def server_url(self) -> str:
        """Base URL advertised in the API docs."""
        if self.public_host:
            return f"https://{self.public_host}"
        return f"http://localhost:{self.port}"
