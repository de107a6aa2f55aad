"""Runtime configuration, read from the environment.

A ``.env`` file in the working directory is loaded first, so local
overrides do not need to be exported by hand.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from storefront.domain.exceptions import ValidationError

DEFAULT_API_URL = "https://back-g0yq.onrender.com"
DEFAULT_USER_ID = "demo-user"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:

    api_url: str = DEFAULT_API_URL
    user_id: str = DEFAULT_USER_ID
    timeout: float = DEFAULT_TIMEOUT

    @staticmethod
    def from_env() -> Settings:
        load_dotenv()
        raw_timeout = os.environ.get("STOREFRONT_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ValidationError(
                f"STOREFRONT_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from exc
        return Settings(
            api_url=os.environ.get("STOREFRONT_API_URL") or DEFAULT_API_URL,
            user_id=os.environ.get("STOREFRONT_USER_ID") or DEFAULT_USER_ID,
            timeout=timeout,
        )
