# onboarding_proxy/utils/parsing.py
import json
import math
from typing import Any, NamedTuple, Union


class ParseResult(NamedTuple):
    """Outcome of a lenient JSON parse: ``ok`` is False when the input was not valid JSON."""

    ok: bool
    value: Any = None

    def value_or(self, default: Any) -> Any:
        return self.value if self.ok else default


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    # 1e400 overflows to inf, which no JSON response can carry
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Non-finite JSON number: {text}")
    return value


def parse_json(raw: Union[str, bytes, None]) -> ParseResult:
    """Strict JSON only: NaN, Infinity and overflowing numbers count as malformed."""
    if raw is None:
        return ParseResult(False)
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            return ParseResult(False)
    if not raw.strip():
        return ParseResult(False)
    try:
        return ParseResult(True, json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float))
    except ValueError:
        return ParseResult(False)


def parse_json_object(raw: Union[str, bytes, None]) -> ParseResult:
    """Like :func:`parse_json`, but only a JSON object counts as a successful parse."""
    result = parse_json(raw)
    if result.ok and isinstance(result.value, dict):
        return result
    return ParseResult(False)
