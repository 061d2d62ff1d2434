from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.common import get_logger
from .container import build_shipping_service
from .serializers import AddressInfoSerializer, PostalCodeSerializer, ShippingQuoteSerializer
from .services import InvalidPostalCodeError

logger = get_logger(__name__).bind(component="shipping", layer="view")


def _invalid_postal_code(exc, raw):
    return error_response("VALIDATION_ERROR", str(exc), {"zip_code": raw})


@extend_schema(tags=["Shipping"])
class ShippingQuoteView(APIView):
    service = build_shipping_service()
    log = logger.bind(view="ShippingQuoteView")

    @extend_schema(
        summary="Quote delivery and collection costs",
        description=(
            "Resolves the ZIP code to a state and returns that state's shipping zone. "
            "When geocoding is unavailable or the state has no zone, default costs apply."
        ),
        request=PostalCodeSerializer,
        responses={
            200: ShippingQuoteSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = PostalCodeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        raw = serializer.validated_data["zip_code"]
        try:
            quote = self.service.resolve(raw)
        except InvalidPostalCodeError as exc:
            self.log.info("Rejected postal code", zip_code=raw)
            return _invalid_postal_code(exc, raw)
        return Response(ShippingQuoteSerializer(quote).data)


@extend_schema(tags=["Shipping"])
class AddressLookupView(APIView):
    service = build_shipping_service()
    log = logger.bind(view="AddressLookupView")

    @extend_schema(
        summary="Look up the address for a ZIP code",
        request=PostalCodeSerializer,
        responses={
            200: AddressInfoSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = PostalCodeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        raw = serializer.validated_data["zip_code"]
        try:
            address = self.service.lookup_address(raw)
        except InvalidPostalCodeError as exc:
            return _invalid_postal_code(exc, raw)
        return Response(AddressInfoSerializer(address).data)
