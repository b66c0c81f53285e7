"""Tests for CheckResult and the enums."""

import pytest

from loginllama import AuthenticationOutcome, CheckResult, LoginCheckStatus


def test_ok():
    assert CheckResult(status="success").ok
    assert not CheckResult(status="error").ok


def test_has_code():
    result = CheckResult(status="error", codes=[LoginCheckStatus.KNOWN_PROXY])
    assert result.has_code("known_proxy")
    assert not result.has_code(LoginCheckStatus.KNOWN_VPN)


def test_to_dict_omits_unset_optionals():
    result = CheckResult(status="success", message="ok", codes=["login_valid"], risk_score=2)
    assert result.to_dict() == {
        "status": "success",
        "message": "ok",
        "codes": ["login_valid"],
        "risk_score": 2,
        "environment": "production",
        "meta": {},
    }


def test_to_dict_includes_set_optionals():
    result = CheckResult(status="error", error="invalid_api_key", email_sent=False)
    data = result.to_dict()
    assert data["error"] == "invalid_api_key"
    assert data["email_sent"] is False
    assert "unrecognized_device" not in data


def test_immutable():
    result = CheckResult(status="success")
    with pytest.raises(AttributeError):
        result.status = "error"  # type: ignore[misc]


def test_enum_values():
    assert AuthenticationOutcome.FAILED == "failed"
    assert LoginCheckStatus.VALID == "login_valid"
