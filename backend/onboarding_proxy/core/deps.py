# onboarding_proxy/core/deps.py
import httpx
from fastapi import Depends, Request

from onboarding_proxy.core.config import Settings
from onboarding_proxy.services.forwarder import OnboardingForwarder


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_forwarder(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> OnboardingForwarder:
    return OnboardingForwarder(client, settings)
