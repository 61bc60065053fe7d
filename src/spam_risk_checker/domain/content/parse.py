"""Turn a caller payload into the platform-tagged input model."""

from __future__ import annotations

from collections.abc import Mapping
import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from spam_risk_checker.core.errors import InputError
from spam_risk_checker.domain.content.models import AnalysisInput

_INPUT_ADAPTER: TypeAdapter[AnalysisInput] = TypeAdapter(AnalysisInput)

# Short platform tags used by older form builds.
_PLATFORM_ALIASES = {
    "email": "email",
    "reddit": "redditLike",
    "redditlike": "redditLike",
    "facebook": "facebookLike",
    "facebooklike": "facebookLike",
}


def _normalize_platform(raw: Any) -> str:
    key = str(raw or "").strip().lower()
    return _PLATFORM_ALIASES.get(key, str(raw or "").strip())


def parse_analysis_input(payload: Mapping[str, Any] | str) -> AnalysisInput:
    """Validate a UI payload (``platform``, ``title``, ``content``, ``fromEmail``).

    A JSON object string is accepted as well. Fields that do not belong to the
    selected platform are dropped by the model rather than rejected.
    """

    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise InputError(f"payload is not valid JSON: {exc.msg}") from exc
    if not isinstance(payload, Mapping):
        raise InputError(f"payload must be a mapping, got {type(payload).__name__}")

    data = dict(payload)
    data["platform"] = _normalize_platform(data.get("platform"))

    try:
        return _INPUT_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise InputError(f"invalid analysis payload: {exc.error_count()} error(s); {exc.errors()[0]['msg']}") from exc
