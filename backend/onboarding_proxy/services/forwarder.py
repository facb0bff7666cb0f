# onboarding_proxy/services/forwarder.py
from typing import Any, Dict

import backoff
import httpx

from onboarding_proxy.core.config import Settings
from onboarding_proxy.core.errors import UpstreamRejectedError, UpstreamTransientError
from onboarding_proxy.core.logging import logger
from onboarding_proxy.schemas.onboarding import OnboardingPayload
from onboarding_proxy.services.credentials import build_upstream_headers
from onboarding_proxy.utils.parsing import parse_json, parse_json_object

SCHEMA_NOT_READY = "schema_not_ready"


def linear(step: float = 0.5):
    """Wait generator for backoff: step, 2*step, 3*step, ..."""
    # Advance past the initial .send() made by backoff
    yield
    n = 1
    while True:
        yield step * n
        n += 1


def is_schema_not_ready(response: httpx.Response) -> bool:
    if response.status_code != 503:
        return False
    body = parse_json_object(response.content).value_or({})
    return body.get("error") == SCHEMA_NOT_READY


def upstream_error_body(response: httpx.Response) -> Any:
    raw = response.text
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type:
        return parse_json(raw).value_or(raw)
    return raw


def _log_retry(details):
    logger.warning(
        "Upstream schema not ready, retrying",
        attempt=details["tries"],
        wait_seconds=details["wait"],
    )


def _log_giveup(details):
    logger.error("Upstream schema still not ready, giving up", attempts=details["tries"])


class OnboardingForwarder:
    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings

    @property
    def url(self) -> str:
        return self.settings.onboarding_url

    async def _post(self, body: Dict[str, Any], headers: Dict[str, str]) -> httpx.Response:
        return await self.client.post(self.url, json=body, headers=headers)

    async def send(self, payload: OnboardingPayload) -> httpx.Response:
        """POST the payload upstream, retrying while the backend reports schema_not_ready."""
        headers = build_upstream_headers(self.settings.MAYADESTEK_API_KEY)
        post = backoff.on_predicate(
            linear,
            is_schema_not_ready,
            max_tries=self.settings.SCHEMA_RETRY_MAX_ATTEMPTS,
            jitter=None,
            on_backoff=_log_retry,
            on_giveup=_log_giveup,
            step=self.settings.SCHEMA_RETRY_STEP_SECONDS,
        )(self._post)
        logger.info("Forwarding onboarding request", url=self.url)
        return await post(payload.to_upstream(), headers)

    async def start(self, payload: OnboardingPayload) -> Dict[str, Any]:
        response = await self.send(payload)

        if not response.is_success:
            body = upstream_error_body(response)
            if is_schema_not_ready(response):
                raise UpstreamTransientError(
                    self.url,
                    response.status_code,
                    body,
                    attempts=self.settings.SCHEMA_RETRY_MAX_ATTEMPTS,
                )
            raise UpstreamRejectedError(self.url, response.status_code, body)

        parsed = parse_json_object(response.content)
        if not parsed.ok:
            logger.warning("Upstream success body is not a JSON object", status_code=response.status_code)
        logger.info("Onboarding request accepted", status_code=response.status_code)
        return {
            "build": self.settings.build_id,
            **parsed.value_or({}),
            "base_url": self.settings.api_base,
            "backend_url": self.url,
        }
