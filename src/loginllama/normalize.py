"""Map both generations of the API's reply format onto :class:`CheckResult`.

The service answered with flat JSON (``status`` / ``message`` / ``codes``)
before moving to JSON:API documents (``data.attributes`` / ``errors`` /
``meta``).  JSON:API replies are normalized; anything else is handed back
untouched so integrators of the flat format keep receiving what they always
received.
"""

from __future__ import annotations

import logging
from typing import Any

from loginllama.result import CheckResult

logger = logging.getLogger(__name__)


def _first_set(*values: Any) -> Any:
    """Return the first value that is not ``None``."""
    for value in values:
        if value is not None:
            return value
    return None


def _as_dict(value: Any) -> dict[str, Any] | None:
    return value if isinstance(value, dict) else None


def _from_error(error: Any, meta: dict[str, Any] | None) -> CheckResult:
    error = _as_dict(error) or {}
    return CheckResult(
        status="error",
        message=_first_set(error.get("detail"), error.get("title"), "Unknown error"),
        codes=[],
        risk_score=0,
        environment=_first_set((meta or {}).get("environment"), "unknown"),
        error=_first_set(error.get("code"), "unknown_error"),
        meta=meta or {},
    )


def _from_attributes(attrs: dict[str, Any], meta: dict[str, Any] | None) -> CheckResult:
    codes = attrs.get("risk_codes")
    return CheckResult(
        status="success" if attrs.get("status") == "pass" else "error",
        message=_first_set(attrs.get("message"), ""),
        codes=list(codes) if isinstance(codes, list) else [],
        risk_score=_first_set(attrs.get("risk_score"), 0),
        environment=_first_set((meta or {}).get("environment"), "production"),
        unrecognized_device=attrs.get("unrecognized_device"),
        authentication_outcome=attrs.get("authentication_outcome"),
        email_sent=(meta or {}).get("email_sent"),
        meta=meta or {},
    )


def normalize_response(raw: Any) -> CheckResult | Any:
    """Return a :class:`CheckResult` for JSON:API replies, *raw* otherwise.

    * ``errors`` (non-empty list): the first error becomes an ``"error"``
      result; environment defaults to ``"unknown"``.
    * ``data.attributes``: ``status == "pass"`` maps to ``"success"``;
      environment defaults to ``"production"``.
    * Non-objects and unrecognized objects (the legacy flat format among
      them) are returned unchanged.
    """
    if not isinstance(raw, dict):
        return raw

    meta = _as_dict(raw.get("meta"))

    errors = raw.get("errors")
    if isinstance(errors, list) and errors:
        logger.debug("Normalizing JSON:API error document")
        return _from_error(errors[0], meta)

    attrs = _as_dict((_as_dict(raw.get("data")) or {}).get("attributes"))
    if attrs is not None:
        logger.debug("Normalizing JSON:API resource document")
        return _from_attributes(attrs, meta)

    return raw
