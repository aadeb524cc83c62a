from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(dotenv_path=ENV_PATH)

DEFAULT_TIMEOUT_SECONDS = 15
DEFAULT_KEY_VERSION = 1
DEFAULT_PORT = 1999


@dataclass(frozen=True)
class SuperQiSettings:
    base_url: str
    client_id: str
    private_key: str
    key_version: int = DEFAULT_KEY_VERSION
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def get_superqi_base_url() -> str:
    base_url = os.getenv("SUPERQI_BASE_URL", "").strip()
    if base_url:
        return base_url.rstrip("/")
    raise RuntimeError("SUPERQI_BASE_URL is required")


def get_superqi_client_id() -> str:
    client_id = os.getenv("SUPERQI_CLIENT_ID", "").strip()
    if client_id:
        return client_id
    raise RuntimeError("SUPERQI_CLIENT_ID is required")


def get_superqi_private_key() -> str:
    private_key = os.getenv("SUPERQI_PRIVATE_KEY", "").strip()
    if private_key:
        # single-line env values carry escaped newlines
        return private_key.replace("\\n", "\n")

    key_path = os.getenv("SUPERQI_PRIVATE_KEY_PATH", "").strip()
    if key_path:
        try:
            return Path(key_path).read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise RuntimeError(
                f"SUPERQI_PRIVATE_KEY_PATH could not be read: {key_path}"
            ) from exc

    raise RuntimeError("SUPERQI_PRIVATE_KEY or SUPERQI_PRIVATE_KEY_PATH is required")


def get_superqi_key_version() -> int:
    raw_version = os.getenv("SUPERQI_KEY_VERSION", str(DEFAULT_KEY_VERSION)).strip()
    key_version = int(raw_version)
    if key_version <= 0:
        raise RuntimeError("SUPERQI_KEY_VERSION must be greater than 0")
    return key_version


def get_superqi_timeout_seconds() -> float:
    raw_timeout = os.getenv(
        "SUPERQI_TIMEOUT_SECONDS",
        str(DEFAULT_TIMEOUT_SECONDS),
    ).strip()
    timeout = float(raw_timeout)
    if timeout <= 0:
        raise RuntimeError("SUPERQI_TIMEOUT_SECONDS must be greater than 0")
    return timeout


def get_port() -> int:
    return int(os.getenv("PORT", str(DEFAULT_PORT)).strip())


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def load_superqi_settings() -> SuperQiSettings:
    return SuperQiSettings(
        base_url=get_superqi_base_url(),
        client_id=get_superqi_client_id(),
        private_key=get_superqi_private_key(),
        key_version=get_superqi_key_version(),
        timeout_seconds=get_superqi_timeout_seconds(),
    )
