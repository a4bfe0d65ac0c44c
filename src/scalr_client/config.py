from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict

from . import client as _client
from .client import DEFAULT_ADDRESS, DEFAULT_BASE_PATH, DEFAULT_TIMEOUT_SECONDS, ScalrClient


@dataclass(frozen=True)
class ClientConfig:
    token: str
    address: str = DEFAULT_ADDRESS
    base_path: str = DEFAULT_BASE_PATH
    headers: Dict[str, str] = field(default_factory=dict)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def client_kwargs(self) -> Dict[str, Any]:
        return {
            "token": self.token,
            "address": self.address,
            "base_path": self.base_path,
            "headers": dict(self.headers),
            "timeout_seconds": self.timeout_seconds,
        }


def _env_timeout() -> float:
    raw = os.getenv("SCALR_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid SCALR_TIMEOUT_SECONDS: {raw!r}") from exc


def load_env_config(*, use_dotenv: bool = True) -> ClientConfig:
    """Load Scalr address, base path, token and timeout from environment (optional .env)."""
    if use_dotenv:
        _client.load_dotenv()
    return ClientConfig(
        token=os.getenv("SCALR_TOKEN", "").strip(),
        address=os.getenv("SCALR_ADDRESS", "").strip() or DEFAULT_ADDRESS,
        base_path=os.getenv("SCALR_BASE_PATH", "").strip() or DEFAULT_BASE_PATH,
        timeout_seconds=_env_timeout(),
    )


def create_client_from_env(**kwargs) -> ScalrClient:
    """Create a ScalrClient from environment variables; kwargs override them."""
    config = load_env_config()
    if not config.token:
        raise ValueError("Missing SCALR_TOKEN in environment.")
    options = config.client_kwargs()
    options.update(kwargs)
    return ScalrClient(**options)


__all__ = ["ClientConfig", "load_env_config", "create_client_from_env"]
