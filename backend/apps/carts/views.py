from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.catalog.services import BundleNotAvailableError, ProductNotFoundError
from apps.common import get_logger
from .commands import AddItemCommand, LineRefCommand, RentalDatesCommand
from .container import build_cart_service
from .serializers import (
    CartAddItemSerializer,
    CartLineRefSerializer,
    CartQuantitySerializer,
    CartReadSerializer,
    RentalDatesSerializer,
)
from .services import InvalidRentalDatesError

logger = get_logger(__name__).bind(component="carts", layer="view")


def _cart_response(dto, http_status=status.HTTP_200_OK):
    return Response(CartReadSerializer(dto).data, status=http_status)


@extend_schema(tags=["Cart"])
class CartView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartView")

    @extend_schema(summary="Get session cart", responses={200: CartReadSerializer})
    def get(self, request):
        return _cart_response(self.service.get_cart(request.session))

    @extend_schema(
        summary="Clear session cart",
        description="Removes every line item. Rental dates are kept.",
        responses={200: CartReadSerializer},
    )
    def delete(self, request):
        return _cart_response(self.service.clear(request.session))


@extend_schema(tags=["Cart"])
class CartItemsView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartItemsView")

    @extend_schema(
        summary="Add product to cart",
        description=(
            "Adds a product by id. Pass bundle_size to add the bundle variant; it becomes a "
            "separate line keyed by its Bundle-<size> category. Quantities below 1 count as 1."
        ),
        request=CartAddItemSerializer,
        responses={
            201: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CartAddItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = AddItemCommand.from_raw(dict(serializer.validated_data))
        try:
            dto = self.service.add_product(request.session, command)
        except ProductNotFoundError:
            return error_response(
                "NOT_FOUND", "Product not found", {"productId": command.product_id}
            )
        except BundleNotAvailableError as exc:
            return error_response(
                "VALIDATION_ERROR",
                str(exc),
                {"productId": command.product_id, "bundleSize": command.bundle_size},
            )
        return _cart_response(dto, status.HTTP_201_CREATED)

    @extend_schema(
        summary="Change line quantity",
        description="Quantities of zero or below remove the line.",
        request=CartQuantitySerializer,
        responses={200: CartReadSerializer},
    )
    def patch(self, request):
        serializer = CartQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = LineRefCommand.from_raw(dict(serializer.validated_data))
        return _cart_response(self.service.update_quantity(request.session, command))

    @extend_schema(
        summary="Remove line from cart",
        request=CartLineRefSerializer,
        responses={200: CartReadSerializer},
    )
    def delete(self, request):
        serializer = CartLineRefSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = LineRefCommand.from_raw(dict(serializer.validated_data))
        return _cart_response(self.service.remove_product(request.session, command))


@extend_schema(tags=["Cart"])
class CartDatesView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartDatesView")

    @extend_schema(
        summary="Set rental dates",
        request=RentalDatesSerializer,
        responses={
            200: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request):
        serializer = RentalDatesSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        command = RentalDatesCommand(
            start=data.get("rental_start_date"), end=data.get("rental_end_date")
        )
        try:
            dto = self.service.set_rental_dates(request.session, command)
        except InvalidRentalDatesError as exc:
            return error_response(
                "VALIDATION_ERROR",
                str(exc),
                {
                    "rental_start_date": str(command.start),
                    "rental_end_date": str(command.end),
                },
            )
        return _cart_response(dto)


@extend_schema(tags=["Cart"])
class CartVisibilityView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartVisibilityView")
    panel_action = "open"

    @extend_schema(summary="Open or close the cart panel", request=None, responses={200: CartReadSerializer})
    def post(self, request):
        if self.panel_action == "close":
            dto = self.service.close(request.session)
        else:
            dto = self.service.open(request.session)
        return _cart_response(dto)
