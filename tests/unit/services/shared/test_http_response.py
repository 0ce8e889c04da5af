import json

import pytest
from pydantic import BaseModel, ValidationError

from services.shared.domain.exception import (
    DomainException,
    ErrorKind,
    ForbiddenException,
    InvalidStateException,
    ResourceNotFoundException,
    ResourceUnavailableException,
)
from services.shared.utils import (
    api_response,
    error_response,
    status_code_for,
    validation_error_response,
)


class TestApiResponse:
    def test_body_is_json_encoded(self):
        response = api_response(200, {"message": "ok"})

        assert response["statusCode"] == 200
        assert response["headers"] == {"Content-Type": "application/json"}
        assert json.loads(response["body"]) == {"message": "ok"}

    def test_list_body(self):
        response = api_response(200, [])
        assert json.loads(response["body"]) == []


class TestErrorResponse:
    """エラー種別とステータスコードの対応"""

    @pytest.mark.parametrize(
        "kind, status_code",
        [
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.UNAVAILABLE, 400),
            (ErrorKind.INVALID_INPUT, 400),
            (ErrorKind.FORBIDDEN, 403),
            (ErrorKind.INVALID_STATE, 400),
        ],
    )
    def test_status_code_for_each_kind(self, kind, status_code):
        assert status_code_for(kind) == status_code

    @pytest.mark.parametrize(
        "error, expected_kind",
        [
            (ResourceNotFoundException("x"), ErrorKind.NOT_FOUND),
            (ResourceUnavailableException("x"), ErrorKind.UNAVAILABLE),
            (ForbiddenException("x"), ErrorKind.FORBIDDEN),
            (InvalidStateException("x"), ErrorKind.INVALID_STATE),
            (DomainException("x"), ErrorKind.INVALID_INPUT),
        ],
    )
    def test_exception_carries_kind(self, error, expected_kind):
        assert error.kind == expected_kind

    def test_error_body_contains_kind_and_message(self):
        response = error_response(ResourceNotFoundException("Booking not found"))

        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {
            "message": "Booking not found",
            "kind": "NOT_FOUND",
        }

    def test_message_override(self):
        response = error_response(
            ResourceUnavailableException("No seats on FL001"),
            message="Flight unavailable",
        )
        assert json.loads(response["body"])["message"] == "Flight unavailable"


class TestValidationErrorResponse:
    def test_lists_field_errors(self):
        class _Model(BaseModel):
            pnr: str

        with pytest.raises(ValidationError) as exc_info:
            _Model.model_validate({})

        response = validation_error_response(exc_info.value)
        body = json.loads(response["body"])

        assert response["statusCode"] == 400
        assert body["kind"] == "INVALID_INPUT"
        assert body["errors"][0].startswith("pnr:")
