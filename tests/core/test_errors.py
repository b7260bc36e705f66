"""Error Hierarchy — verifies status mapping and the response envelope.

Tests cover:
    - Validation → 400, NotFound → 404, Store → 500
    - to_response() always has message + error{code, category, severity, timestamp, details}
    - Context fields populated from constructor arguments
"""

import pytest

from customer_api.core.errors import (
    CustomerApiError, CustomerNotFoundError, CustomerValidationError, ErrorContext,
    ErrorCategory, ErrorSeverity, StoreError,
)


@pytest.mark.parametrize("exc, status, code", [
    (CustomerValidationError("bad", "city"), 400, "VALIDATION_ERROR"),
    (CustomerNotFoundError(3), 404, "CUSTOMER_NOT_FOUND"),
    (StoreError("down", "insert"), 500, "STORE_ERROR"),
])
def test_error_maps_to_http_status(exc, status, code):
    assert isinstance(exc, CustomerApiError)
    assert exc.http_status == status
    assert exc.code == code


def test_response_envelope_shape():
    body = CustomerValidationError("city must be one of: X", "city").to_response()
    assert body["message"] == "city must be one of: X"
    error = body["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == ErrorCategory.VALIDATION.value
    assert error["severity"] == ErrorSeverity.ERROR.value
    assert error["details"] == {"field": "city"}
    assert "T" in error["timestamp"]


def test_not_found_carries_customer_id():
    exc = CustomerNotFoundError(42)
    assert exc.customer_id == 42
    assert exc.context.customer_id == 42
    assert "42" in exc.message
    assert exc.to_response()["error"]["details"] == {"customer_id": 42}


def test_store_error_records_operation():
    exc = StoreError("OperationalError", "list")
    assert exc.operation == "list"
    assert exc.context.operation == "list"
    assert exc.message == "Database list failed: OperationalError"
    assert exc.severity == ErrorSeverity.CRITICAL


def test_base_error_is_an_exception():
    with pytest.raises(CustomerApiError, match="boom"):
        raise CustomerApiError("boom", "X", ErrorCategory.INTERNAL)


def test_errors_leave_caller_context_untouched():
    shared = ErrorContext()
    not_found = CustomerNotFoundError(7, context=shared)
    store = StoreError("down", "update", context=shared)

    assert shared.customer_id is None
    assert shared.operation is None
    assert not_found.context is not shared
    assert not_found.context.customer_id == 7
    assert store.context.operation == "update"
    assert store.context.timestamp == shared.timestamp
