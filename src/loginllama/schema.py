"""Pydantic models for check options, the outbound payload and the runner.

Option keys are accepted in camelCase (``ipAddress``) and snake_case
(``ip_address``).  When a mapping carries both, camelCase wins.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from loginllama.result import AuthenticationOutcome


def _either(camel: str, snake: str) -> Any:
    return Field(default=None, validation_alias=AliasChoices(camel, snake))


class CheckOptions(BaseModel):
    """Per-call overrides and extra signals for ``LoginLlama.check``.

    Attributes:
        ip_address: Override the auto-detected IP.
        user_agent: Override the auto-detected User-Agent.
        email_address: User's email.
        geo_country: Country name or ISO code.
        geo_city: City name.
        user_time_of_day: User's local time, ``HH:mm``.
        authentication_outcome: ``success``, ``failed`` or ``pending``.
        request: Framework request object, mapping or view to read IP and
            User-Agent from.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore", frozen=True)

    ip_address: str | None = _either("ipAddress", "ip_address")
    user_agent: str | None = _either("userAgent", "user_agent")
    email_address: str | None = _either("emailAddress", "email_address")
    geo_country: str | None = _either("geoCountry", "geo_country")
    geo_city: str | None = _either("geoCity", "geo_city")
    user_time_of_day: str | None = _either("userTimeOfDay", "user_time_of_day")
    authentication_outcome: AuthenticationOutcome | None = _either(
        "authenticationOutcome", "authentication_outcome"
    )
    request: Any = None


class LoginCheckPayload(BaseModel):
    """Body of ``POST /login/check``.  Optional fields are sent as ``null``."""

    ip_address: str
    user_agent: str
    identity_key: str
    email_address: str | None = None
    geo_country: str | None = None
    geo_city: str | None = None
    user_time_of_day: str | None = None
    authentication_outcome: AuthenticationOutcome | None = None


class RunnerInput(BaseModel):
    """Input read by ``python -m loginllama`` from stdin.

    Attributes:
        identity_key: User identifier to check.
        action: ``check``, ``success`` (report_success) or ``failure``
            (report_failure).
        options: Check options, camelCase or snake_case keys.
        api_key: API key; falls back to ``LOGINLLAMA_API_KEY``.
    """

    identity_key: str
    action: Literal["check", "success", "failure"] = "check"
    options: dict[str, Any] = Field(default_factory=dict)
    api_key: str | None = None


class RunnerOutput(BaseModel):
    """Output written by ``python -m loginllama`` to stdout.

    The runner always writes valid JSON matching this schema, even on errors.

    Attributes:
        success: Whether the check call completed.
        result: Normalized result, or the raw reply for legacy formats.
        error: Error message (on failure).
        error_type: Error class name (on failure).
        status_code: HTTP status when the API rejected the call.
    """

    success: bool
    result: Any = None
    error: str = ""
    error_type: str = ""
    status_code: int | None = None
