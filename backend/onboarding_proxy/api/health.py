# onboarding_proxy/api/health.py
from fastapi import APIRouter, Depends

from onboarding_proxy.core.config import Settings
from onboarding_proxy.core.deps import get_settings

router = APIRouter()

SERVICE_NAME = "onboarding-proxy"
VERSION = "0.1.0"


@router.get("/healthz")
async def health_check(settings: Settings = Depends(get_settings)) -> dict:
    api_key_configured = bool((settings.MAYADESTEK_API_KEY or "").strip())
    status = "healthy" if api_key_configured else "degraded"
    return {
        "service": SERVICE_NAME,
        "status": status,
        "version": VERSION,
        "build": settings.build_id,
        "checks": {
            "api_key_configured": api_key_configured,
            "api_base": settings.api_base,
        },
    }
