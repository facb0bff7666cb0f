# onboarding_proxy/api/onboarding.py
from fastapi import APIRouter, Depends, Request

from onboarding_proxy.core.deps import get_forwarder
from onboarding_proxy.core.errors import InternalError, OnboardingError, ValidationError
from onboarding_proxy.core.logging import logger
from onboarding_proxy.services.credentials import select_auth_headers
from onboarding_proxy.services.forwarder import OnboardingForwarder
from onboarding_proxy.services.normalizer import normalize_payload
from onboarding_proxy.utils.parsing import parse_json_object

router = APIRouter()


@router.post("/start")
async def start_onboarding(request: Request, forwarder: OnboardingForwarder = Depends(get_forwarder)):
    try:
        # Fail before reading the body when no request could be authenticated
        select_auth_headers(forwarder.settings.MAYADESTEK_API_KEY)

        body = parse_json_object(await request.body())
        if not body.ok:
            raise ValidationError(
                "Body is null (request.json failed)",
                hint="Check Content-Type and JSON payload",
            )

        payload = normalize_payload(body.value)
        return await forwarder.start(payload)
    except OnboardingError:
        raise
    except Exception as e:
        logger.exception("Unhandled error while forwarding onboarding request")
        raise InternalError(str(e)) from e
