"""Application settings loaded from environment variables.

A ``.env`` file in the working directory is read first; real environment
variables win over it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:

    data_dir: Path = DEFAULT_DATA_DIR
    jwt_secret_key: str = "change-me"
    jwt_issuer: str = "mockcommerce"
    jwt_audience: str = "mockcommerce"
    enforce_ownership: bool = True
    log_level: str = "INFO"
    log_file: str | None = None
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @classmethod
    def from_env(cls) -> Settings:
        load_dotenv()
        return cls(
            data_dir=Path(os.getenv("MOCKCOMMERCE_DATA_DIR", str(DEFAULT_DATA_DIR))),
            jwt_secret_key=os.getenv("JWT_SECRET_KEY", "change-me"),
            jwt_issuer=os.getenv("JWT_ISSUER", "mockcommerce"),
            jwt_audience=os.getenv("JWT_AUDIENCE", "mockcommerce"),
            enforce_ownership=_flag("ENFORCE_OWNERSHIP", "true"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            api_host=os.getenv("API_HOST", "127.0.0.1"),
            api_port=int(os.getenv("API_PORT", "8000")),
        )
