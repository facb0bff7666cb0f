# onboarding_proxy/schemas/onboarding.py
from typing import Any, Dict, Optional

from pydantic import BaseModel

DEFAULT_PARENT_NAME = "Veli"
DEFAULT_GRADE_CODE = "G8"
DEFAULT_GOAL = "LGS"


class OnboardingPayload(BaseModel):
    parent_name: str = DEFAULT_PARENT_NAME
    student_name: str
    grade_code: str = DEFAULT_GRADE_CODE
    student_phone: str
    goal: str = DEFAULT_GOAL
    # Backend may use parent_phone for WhatsApp flows
    parent_phone: Optional[str] = None
    referral_code: Optional[str] = None

    def to_upstream(self) -> Dict[str, Any]:
        """Body sent upstream; absent optional fields are left out entirely."""
        return self.model_dump(exclude_none=True)
