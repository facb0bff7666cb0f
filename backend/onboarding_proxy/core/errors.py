# onboarding_proxy/core/errors.py
"""
Error taxonomy of the onboarding proxy.

Every failure is turned into a JSON body at the request boundary; the HTTP
status comes from the exception itself.
"""
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from onboarding_proxy.core.logging import logger


class OnboardingError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def content(self) -> Dict[str, Any]:
        return {"error": self.message}


class ConfigurationError(OnboardingError):
    status_code = 500


class ValidationError(OnboardingError):
    status_code = 400

    def __init__(
        self,
        message: str,
        *,
        received: Any = None,
        normalized: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.received = received
        self.normalized = normalized
        self.hint = hint

    def content(self) -> Dict[str, Any]:
        body = super().content()
        if self.hint is not None:
            body["hint"] = self.hint
        if self.normalized is not None:
            body["received"] = self.received
            body["normalized"] = self.normalized
        return body


class UpstreamRejectedError(OnboardingError):
    def __init__(self, url: str, status: int, body: Any, message: Optional[str] = None):
        super().__init__(message or f"Backend rejected request ({status})")
        self.url = url
        self.status_code = status
        self.body = body

    def content(self) -> Dict[str, Any]:
        body = super().content()
        body["backend"] = {"url": self.url, "status": self.status_code, "body": self.body}
        return body


class UpstreamTransientError(UpstreamRejectedError):
    """schema_not_ready persisted through every allowed attempt."""

    def __init__(self, url: str, status: int, body: Any, attempts: int):
        super().__init__(
            url,
            status,
            body,
            message=f"Backend schema not ready after {attempts} attempts ({status})",
        )
        self.attempts = attempts


class InternalError(OnboardingError):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(f"Internal server error: {detail or 'Unknown error'}")


async def onboarding_error_handler(request: Request, exc: OnboardingError) -> JSONResponse:
    settings = request.app.state.settings
    log = logger.error if exc.status_code >= 500 else logger.warning
    log("Onboarding request failed", error_type=type(exc).__name__, status_code=exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content={"build": settings.build_id, **exc.content()},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OnboardingError, onboarding_error_handler)
