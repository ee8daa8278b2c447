import pytest

from app.crm.modules.customers.errors import (
    FALLBACK_MESSAGE,
    CustomersApiError,
    Fallback,
    SingleMessage,
    ValidationErrors,
    classify_failure,
    failure_messages,
)


def test_validation_message_list():
    e = CustomersApiError(
        "Request failed with status code 400",
        status_code=400,
        payload={"message": ["First name required", "Email invalid"]},
    )
    kind = classify_failure(e)
    assert kind == ValidationErrors(("First name required", "Email invalid"))
    assert failure_messages(kind) == ["First name required", "Email invalid"]


def test_payload_single_message():
    e = CustomersApiError("Request failed with status code 409", status_code=409, payload={"message": "Email already exists"})
    assert failure_messages(classify_failure(e)) == ["Email already exists"]


def test_transport_message_without_payload():
    e = CustomersApiError("Connection refused")
    assert classify_failure(e) == SingleMessage("Connection refused")


def test_empty_message_list_uses_transport_message():
    e = CustomersApiError("Request failed with status code 400", status_code=400, payload={"message": []})
    assert classify_failure(e) == SingleMessage("Request failed with status code 400")


def test_transport_error_without_any_text_falls_back():
    assert classify_failure(CustomersApiError("")) == Fallback()


def test_runtime_error_message():
    assert failure_messages(classify_failure(RuntimeError("Network down"))) == ["Network down"]


@pytest.mark.parametrize("failure", [None, "boom", 42, {"message": "not an exception"}, ValueError()])
def test_unrecognised_failures_fall_back(failure):
    assert failure_messages(classify_failure(failure)) == [FALLBACK_MESSAGE]


def test_fallback_text():
    assert FALLBACK_MESSAGE == "An unexpected error occurred"
