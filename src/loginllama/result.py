"""CheckResult — the normalized outcome of a login check."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Literal

CheckStatus = Literal["success", "error"]


class LoginCheckStatus(StrEnum):
    """Risk codes returned by the LoginLlama API."""

    VALID = "login_valid"
    IP_ADDRESS_SUSPICIOUS = "ip_address_suspicious"
    DEVICE_FINGERPRINT_SUSPICIOUS = "device_fingerprint_suspicious"
    LOCATION_FINGERPRINT_SUSPICIOUS = "location_fingerprint_suspicious"
    BEHAVIORAL_FINGERPRINT_SUSPICIOUS = "behavioral_fingerprint_suspicious"
    KNOWN_TOR_EXIT_NODE = "known_tor_exit_node"
    KNOWN_PROXY = "known_proxy"
    KNOWN_VPN = "known_vpn"
    KNOWN_BOTNET = "known_botnet"
    KNOWN_BOT = "known_bot"
    IP_ADDRESS_NOT_USED_BEFORE = "ip_address_not_used_before"
    DEVICE_FINGERPRINT_NOT_USED_BEFORE = "device_fingerprint_not_used_before"
    AI_DETECTED_SUSPICIOUS = "ai_detected_suspicious"


class AuthenticationOutcome(StrEnum):
    """How the login attempt ended on the caller's side."""

    SUCCESS = "success"  # credentials were valid (default)
    FAILED = "failed"  # wrong password, MFA failed, ...
    PENDING = "pending"  # pre-auth check, outcome not yet known


@dataclass(frozen=True)
class CheckResult:
    """Immutable, wire-format independent result of ``LoginLlama.check``.

    Attributes:
        status:      ``"success"`` when the login passed, ``"error"`` otherwise.
        message:     Human-readable explanation from the API.
        codes:       Risk codes (see :class:`LoginCheckStatus`) in API order.
        risk_score:  Numeric risk score assigned by the API.
        environment: API environment that served the request.
        error:       Error code, only set when the API rejected the request.
        unrecognized_device:    Whether the device was new for this identity.
        authentication_outcome: Outcome echoed back by the API.
        email_sent:  Whether the API notified the user by email.
        meta:        Raw ``meta`` object of the reply.
    """

    status: CheckStatus
    message: str = ""
    codes: list[str] = field(default_factory=list)
    risk_score: float = 0
    environment: str = "production"
    error: str | None = None
    unrecognized_device: bool | None = None
    authentication_outcome: str | None = None
    email_sent: bool | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def has_code(self, code: str) -> bool:
        return code in self.codes

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict using the API's snake_case keys.

        Optional fields are omitted when unset.
        """
        data: dict[str, Any] = {
            "status": self.status,
            "message": self.message,
            "codes": list(self.codes),
            "risk_score": self.risk_score,
            "environment": self.environment,
        }
        optional = {
            "error": self.error,
            "unrecognized_device": self.unrecognized_device,
            "authentication_outcome": self.authentication_outcome,
            "email_sent": self.email_sent,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        data["meta"] = dict(self.meta)
        return data
