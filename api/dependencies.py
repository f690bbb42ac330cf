from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List

from study_tracker.parsing import OutlineParser, ParsingEngine


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Levels both logging and uvicorn accept.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    level = LOG_LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        raise ValueError(f"Unsupported LOG_LEVEL {value!r}; expected one of {', '.join(LOG_LEVELS)}")
    return level


@dataclass
class ApiConfig:
    max_upload_bytes: int = 10 * 1024 * 1024
    max_json_bytes: int = 1024 * 1024
    static_dir: Path = Path("./public")
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    skip_empty_headers: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    @classmethod
    def from_env(cls) -> "ApiConfig":
        origins = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]
        return cls(
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))),
            max_json_bytes=int(os.getenv("MAX_JSON_BYTES", str(1024 * 1024))),
            static_dir=Path(os.getenv("STATIC_DIR", "./public")),
            cors_allow_origins=origins or ["*"],
            skip_empty_headers=_env_flag("SKIP_EMPTY_HEADERS"),
            log_level=normalize_log_level(os.getenv("LOG_LEVEL", "INFO")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
        )


@lru_cache(maxsize=1)
def get_config() -> ApiConfig:
    return ApiConfig.from_env()


def get_parser(config: ApiConfig) -> ParsingEngine:
    return OutlineParser(skip_empty_headers=config.skip_empty_headers)


class ClientError(Exception):
    """
    Raised by request handlers for client errors that should be reported
    with the ``{"success": false, "error": ...}`` envelope.
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
