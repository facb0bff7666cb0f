# onboarding_proxy/services/credentials.py
from typing import Dict, Optional

from onboarding_proxy.core.errors import ConfigurationError

MISSING_KEY_MESSAGE = (
    "MAYADESTEK_API_KEY is missing. Put your backend secret into .env (local) "
    "or the deployment environment variables (production), then restart the server."
)


def looks_like_jwt(secret: str) -> bool:
    return len(secret.split(".")) == 3


def looks_like_bearer(secret: str) -> bool:
    return secret.lower().startswith("bearer ")


def select_auth_headers(secret: Optional[str]) -> Dict[str, str]:
    """
    Pick the upstream auth header from the shape of the secret.

    JWT-shaped tokens and values already prefixed with ``Bearer`` go into
    ``Authorization``; anything else is treated as an API key.
    """
    trimmed = (secret or "").strip()
    if not trimmed:
        raise ConfigurationError(MISSING_KEY_MESSAGE)

    if looks_like_bearer(trimmed):
        return {"Authorization": trimmed}
    if looks_like_jwt(trimmed):
        return {"Authorization": f"Bearer {trimmed}"}
    return {"x-api-key": trimmed}


def build_upstream_headers(secret: Optional[str]) -> Dict[str, str]:
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    headers.update(select_auth_headers(secret))
    return headers
