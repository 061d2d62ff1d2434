from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import ApplicationError, global_exception_handler

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


def test_application_error_returns_structured_response():
    request = factory.post("/api/orders/")
    exc = ApplicationError(
        "CONFLICT",
        "An order submission is already in progress",
        status_code=status.HTTP_409_CONFLICT,
        details={"orderNumber": "ORD-20250101-00001"},
    )
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_409_CONFLICT
    assert payload["code"] == "CONFLICT"
    assert payload["details"] == {"orderNumber": "ORD-20250101-00001"}


def test_validation_error_preserves_details():
    request = factory.post("/api/shipping/quote/", data={})
    exc = ValidationError({"zipCode": ["This field is required."]})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["message"] == "Validation failed"
    assert payload["details"] == {"zipCode": ["This field is required."]}


def test_http404_is_reported_as_not_found():
    request = factory.get("/api/orders/unknown/")
    response = global_exception_handler(Http404("No order"), _context(request))
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.data["error"]["code"] == "NOT_FOUND"


def test_unhandled_exception_returns_generic_message():
    request = factory.get("/api/cart/")
    response = global_exception_handler(RuntimeError("boom"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert payload["code"] == "SERVER_ERROR"
    assert payload["message"] == "Something went wrong"
    assert "details" not in payload
