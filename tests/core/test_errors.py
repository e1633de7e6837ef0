"""Error Hierarchy — status codes and REST envelopes of the todo errors."""

from app.core.errors import (
    ErrorCategory, ErrorSeverity, InternalError, InvalidInputError, TodoNotFoundError,
)


def test_invalid_input_maps_to_400():
    exc = InvalidInputError("Todo text is required", "text")
    assert exc.http_status == 400
    assert exc.category is ErrorCategory.VALIDATION
    assert exc.to_response() == {
        "success": False, "message": "Todo text is required", "code": "INVALID_INPUT",
    }


def test_not_found_maps_to_404():
    exc = TodoNotFoundError(7)
    assert exc.http_status == 404
    assert exc.todo_id == 7


def test_internal_error_maps_to_500_with_generic_message():
    exc = InternalError()
    assert exc.http_status == 500
    assert exc.severity is ErrorSeverity.CRITICAL
    assert exc.to_response() == {
        "success": False, "message": "Internal server error", "code": "INTERNAL_ERROR",
    }
