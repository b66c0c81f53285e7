"""Tests for normalize_response."""

import pytest

from loginllama import CheckResult, normalize_response

# ── JSON:API errors ──────────────────────────────────────────


def test_error_document():
    result = normalize_response({"errors": [{"detail": "bad key", "code": "invalid_api_key"}]})
    assert result == CheckResult(
        status="error",
        message="bad key",
        codes=[],
        risk_score=0,
        environment="unknown",
        error="invalid_api_key",
        meta={},
    )


def test_error_falls_back_to_title():
    result = normalize_response({"errors": [{"title": "Unauthorized"}]})
    assert result.message == "Unauthorized"
    assert result.error == "unknown_error"


def test_error_without_detail_or_title():
    result = normalize_response({"errors": [{}]})
    assert result.message == "Unknown error"


def test_error_uses_first_entry_and_meta():
    raw = {
        "errors": [{"detail": "first", "code": "a"}, {"detail": "second", "code": "b"}],
        "meta": {"environment": "sandbox"},
    }
    result = normalize_response(raw)
    assert result.message == "first"
    assert result.error == "a"
    assert result.environment == "sandbox"
    assert result.meta == {"environment": "sandbox"}


def test_empty_errors_is_not_an_error():
    raw = {"errors": [], "status": "success"}
    assert normalize_response(raw) is raw


# ── JSON:API resources ───────────────────────────────────────


def test_resource_document():
    raw = {
        "data": {
            "attributes": {
                "status": "pass",
                "message": "ok",
                "risk_score": 3,
                "risk_codes": ["ip_address_suspicious"],
            }
        },
        "meta": {"environment": "production"},
    }
    result = normalize_response(raw)
    assert result.status == "success"
    assert result.message == "ok"
    assert result.risk_score == 3
    assert result.codes == ["ip_address_suspicious"]
    assert result.environment == "production"
    assert result.error is None


def test_resource_non_pass_is_error():
    raw = {"data": {"attributes": {"status": "fail", "risk_codes": ["known_vpn"]}}}
    result = normalize_response(raw)
    assert result.status == "error"
    assert result.message == ""
    assert result.risk_score == 0


def test_resource_environment_defaults_to_production():
    result = normalize_response({"data": {"attributes": {"status": "pass"}}})
    assert result.environment == "production"
    assert result.meta == {}
    assert result.codes == []


def test_resource_optional_fields():
    raw = {
        "data": {
            "attributes": {
                "status": "pass",
                "unrecognized_device": True,
                "authentication_outcome": "failed",
            }
        },
        "meta": {"environment": "production", "email_sent": False},
    }
    result = normalize_response(raw)
    assert result.unrecognized_device is True
    assert result.authentication_outcome == "failed"
    assert result.email_sent is False


def test_resource_keeps_falsy_values():
    raw = {"data": {"attributes": {"status": "pass", "message": "", "risk_score": 0}}}
    result = normalize_response(raw)
    assert result.message == ""
    assert result.risk_score == 0


# ── pass-through ─────────────────────────────────────────────


def test_legacy_flat_reply_passes_through():
    raw = {"status": "success", "message": "Valid login", "codes": ["login_valid"]}
    assert normalize_response(raw) is raw


@pytest.mark.parametrize("raw", [None, "oops", 42, ["a", "b"]])
def test_non_objects_pass_through(raw):
    assert normalize_response(raw) == raw


def test_data_without_attributes_passes_through():
    raw = {"data": {"id": "1"}}
    assert normalize_response(raw) is raw


@pytest.mark.parametrize("codes", [5, "known_vpn", {"a": 1}, True])
def test_malformed_risk_codes_become_empty(codes):
    result = normalize_response({"data": {"attributes": {"status": "pass", "risk_codes": codes}}})
    assert result.status == "success"
    assert result.codes == []
