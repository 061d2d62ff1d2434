from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.carts.container import build_cart_service
from apps.common import get_logger
from .commands import CreateOrderCommand, CustomerData, OrderLineCommand, ShippingCharges
from .container import build_order_service
from .guards import SubmissionGuard, SubmissionInProgressError
from .serializers import (
    OrderCreateSerializer,
    OrderReadSerializer,
    OrderReceiptSerializer,
    PaymentConfirmSerializer,
)
from .services import (
    InvalidOrderError,
    OrderPersistenceError,
    PaymentNotCompletedError,
    PaymentSessionError,
)

logger = get_logger(__name__).bind(component="orders", layer="view")


def _payment_failed(exc: PaymentSessionError):
    return error_response(
        "PAYMENT_SESSION_FAILED",
        "Payment session could not be created",
        {"orderId": exc.order_id, "orderNumber": exc.order_number},
    )


@extend_schema(tags=["Orders"])
class OrderListView(APIView):
    service = build_order_service()
    cart_service = build_cart_service()
    log = logger.bind(view="OrderListView")

    def _build_command(self, request, data) -> CreateOrderCommand:
        raw_items = data.get("items")
        if raw_items is None:
            cart = self.cart_service.load(request.session)
            items = [
                OrderLineCommand(
                    product_id=line.product_id,
                    title=line.title,
                    unit_price=line.unit_price,
                    quantity=line.quantity,
                    category=line.category,
                )
                for line in cart.items
            ]
        else:
            items = [OrderLineCommand.from_raw(dict(raw)) for raw in raw_items]
        return CreateOrderCommand(
            customer=CustomerData.from_raw(dict(data["customer"])),
            items=items,
            shipping=ShippingCharges.from_raw(dict(data["shipping"])),
            quote_only=bool(data.get("quote_only")),
            client_subtotal=data.get("subtotal"),
        )

    @extend_schema(
        summary="Submit order or quote",
        description=(
            "Persists the order with its lines and, unless quote_only is set, opens a payment "
            "session and returns its redirect_url. Totals are recomputed server-side; a client "
            "subtotal is ignored. When items are omitted the session cart is used."
        ),
        request=OrderCreateSerializer,
        responses={
            201: OrderReceiptSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
            500: OpenApiResponse(response=ErrorResponseSerializer),
            502: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        guard = SubmissionGuard(request.session)
        if not guard.acquire():
            raise SubmissionInProgressError()
        try:
            serializer = OrderCreateSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            command = self._build_command(request, serializer.validated_data)
            try:
                receipt = self.service.create_order(command)
            except InvalidOrderError as exc:
                return error_response("VALIDATION_ERROR", str(exc), exc.details)
            except OrderPersistenceError as exc:
                return error_response("ORDER_PERSISTENCE_FAILED", str(exc))
            except PaymentSessionError as exc:
                return _payment_failed(exc)
            self.cart_service.clear(request.session)
            self.log.info(
                "Order submitted via API",
                order_id=receipt.order_id,
                order_number=receipt.order_number,
                quote_only=command.quote_only,
            )
            return Response(OrderReceiptSerializer(receipt).data, status=status.HTTP_201_CREATED)
        finally:
            guard.release()


@extend_schema(tags=["Orders"])
class OrderDetailView(APIView):
    service = build_order_service()
    log = logger.bind(view="OrderDetailView")

    @extend_schema(
        summary="Get order",
        parameters=[OpenApiParameter("order_id", str, OpenApiParameter.PATH)],
        responses={
            200: OrderReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, order_id):
        dto = self.service.get_order(order_id)
        if not dto:
            return error_response("NOT_FOUND", "Order not found", {"id": str(order_id)})
        return Response(OrderReadSerializer(dto).data)


@extend_schema(tags=["Orders"])
class OrderPaymentConfirmView(APIView):
    service = build_order_service()
    log = logger.bind(view="OrderPaymentConfirmView")

    @extend_schema(
        summary="Confirm payment",
        description="Checks the payment session with the provider and marks the order paid.",
        parameters=[OpenApiParameter("order_id", str, OpenApiParameter.PATH)],
        request=PaymentConfirmSerializer,
        responses={
            200: OrderReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
            500: OpenApiResponse(response=ErrorResponseSerializer),
            502: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request, order_id):
        serializer = PaymentConfirmSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        session_id = serializer.validated_data.get("session_id") or None
        try:
            dto = self.service.mark_paid(order_id, session_id)
        except InvalidOrderError as exc:
            return error_response("VALIDATION_ERROR", str(exc), exc.details)
        except PaymentNotCompletedError as exc:
            return error_response("CONFLICT", str(exc), {"id": str(order_id)})
        except OrderPersistenceError as exc:
            return error_response("ORDER_PERSISTENCE_FAILED", str(exc), {"id": str(order_id)})
        except PaymentSessionError as exc:
            return _payment_failed(exc)
        if not dto:
            return error_response("NOT_FOUND", "Order not found", {"id": str(order_id)})
        return Response(OrderReadSerializer(dto).data)
