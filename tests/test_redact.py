from __future__ import annotations

from carinventory._redact import redact_body_for_log, redact_for_log, redact_headers


def test_redact_for_log_redacts_sensitive_keys() -> None:
    payload = {
        "Authorization": "Bearer abc",
        "cookie": "session=1",
        "make": "Toyota",
        "nested": {"password": "pw"},
    }

    redacted = redact_for_log(payload)
    assert redacted["Authorization"] == "<redacted>"
    assert redacted["cookie"] == "<redacted>"
    assert redacted["make"] == "Toyota"
    assert redacted["nested"]["password"] == "<redacted>"


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_body_for_log_parses_json() -> None:
    body = '[{"car_id": 1, "make": "Toyota", "token": "t"}]'
    assert redact_body_for_log(body) == [{"car_id": 1, "make": "Toyota", "token": "<redacted>"}]


def test_redact_body_for_log_handles_plain_text_and_none() -> None:
    assert redact_body_for_log(None) is None
    assert redact_body_for_log("Internal Server Error") == "Internal Server Error"
    assert redact_body_for_log("y" * 300, max_string=5).endswith("<truncated>")


def test_redact_headers_hides_credentials() -> None:
    headers = {"Content-Type": "application/json", "Set-Cookie": "sid=1", "X-Api-Key": "k"}
    assert redact_headers(headers) == {
        "Content-Type": "application/json",
        "Set-Cookie": "<redacted>",
        "X-Api-Key": "<redacted>",
    }
