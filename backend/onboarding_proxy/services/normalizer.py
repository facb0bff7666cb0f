# onboarding_proxy/services/normalizer.py
from typing import Any, Dict, Mapping, Optional, Sequence

from onboarding_proxy.core.errors import ValidationError
from onboarding_proxy.schemas.onboarding import (
    DEFAULT_GOAL,
    DEFAULT_GRADE_CODE,
    DEFAULT_PARENT_NAME,
    OnboardingPayload,
)

# Several key styles are accepted so older landing page builds keep working.
FIELD_ALIASES: Dict[str, Sequence[str]] = {
    "parent_name": ("parent_name", "parentName", "parent"),
    "student_name": ("student_name", "studentName", "student", "name"),
    "grade_code": ("grade_code", "gradeCode"),
    "student_phone": ("student_phone", "studentPhone", "phone", "mobile"),
    "parent_phone": ("parent_phone", "parentPhone", "guardian_phone"),
    "goal": ("goal",),
    "referral_code": ("referral_code", "ref", "referral"),
}

FIELD_DEFAULTS: Dict[str, str] = {
    "parent_name": DEFAULT_PARENT_NAME,
    "grade_code": DEFAULT_GRADE_CODE,
    "goal": DEFAULT_GOAL,
}

REQUIRED_FIELDS = ("student_name", "student_phone")


def _as_text(value: Any) -> Optional[str]:
    # bool is an int subclass but never a meaningful form value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # zero is an empty form value; 5551112233.0 is sent as "5551112233"
        if value == 0:
            return None
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, str):
        return value.strip() or None
    return None


def first_value(body: Mapping[str, Any], aliases: Sequence[str]) -> Optional[str]:
    for alias in aliases:
        value = _as_text(body.get(alias))
        if value:
            return value
    return None


def resolve_fields(body: Mapping[str, Any]) -> Dict[str, str]:
    """Resolve every logical field from its aliases; unresolved fields are left out."""
    resolved = {}
    for field, aliases in FIELD_ALIASES.items():
        value = first_value(body, aliases) or FIELD_DEFAULTS.get(field)
        if value is not None:
            resolved[field] = value
    return resolved


def normalize_payload(body: Mapping[str, Any]) -> OnboardingPayload:
    fields = resolve_fields(body)
    missing = [name for name in REQUIRED_FIELDS if name not in fields]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(REQUIRED_FIELDS)}",
            received=dict(body),
            normalized=fields,
        )
    return OnboardingPayload(**fields)
