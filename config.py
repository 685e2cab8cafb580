# config.py
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    mongodb_uri: Optional[str]
    mongodb_db: str = "student_course_db"
    mongodb_timeout_ms: int = 5000
    static_dir: str = "public"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            mongodb_uri=os.getenv("MONGODB_URI") or None,
            mongodb_db=os.getenv("MONGODB_DB", "student_course_db"),
            mongodb_timeout_ms=int(os.getenv("MONGODB_TIMEOUT_MS", "5000")),
            static_dir=os.getenv("STATIC_DIR", "public"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
