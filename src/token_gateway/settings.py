"""
token_gateway.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (admin password).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Gateway configuration:
    - Strict env-driven configuration (prefix `TOKEN_GATEWAY_`)
    - Defaults safe for local dev; the admin password must be overridden on deploy
    """

    model_config = SettingsConfigDict(env_prefix="TOKEN_GATEWAY_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "token-gateway"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8443

    # TLS is terminated by uvicorn; certificate management lives outside this service.
    ssl_certfile: str | None = None
    ssl_keyfile: str | None = None

    # Static admin credentials (metrics route only).
    admin_username: str = "backend_admin"
    admin_password: str = Field(
        default="remember_to_change_me_by_external_property_on_deploy", repr=False
    )

    # External identity backend used by the HTTP credential verifier.
    verifier_url: str = "http://localhost:9000"
    verifier_path: str = "/authenticate"
    verifier_timeout_seconds: float = Field(default=5.0, gt=0)

    # Random bytes per issued token (token_urlsafe encodes to ~1.3 chars/byte).
    token_bytes: int = Field(default=32, ge=16, le=128)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Admin credentials and verifier settings are two independent trust inputs;
# they are never read by the same code path.
