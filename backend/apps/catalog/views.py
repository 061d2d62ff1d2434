from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.common import get_logger
from .container import build_product_service
from .serializers import ProductReadSerializer

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List rental products",
        description="Active products only. Results may be served from cache.",
        parameters=[
            OpenApiParameter(
                name="category",
                description="Filter by category name (case-insensitive)",
                required=False,
                type=str,
            )
        ],
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, request):
        category = request.query_params.get("category") or None
        self.log.debug("Handling product list request", category=category)
        data = self.service.list_products(category)
        return Response({"products": ProductReadSerializer(data, many=True).data})


@extend_schema(tags=["Catalog"])
class ProductDetailView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[OpenApiParameter("product_id", str, OpenApiParameter.PATH)],
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id: str):
        dto = self.service.get_product(product_id)
        if not dto:
            return error_response("NOT_FOUND", "Product not found", {"id": str(product_id)})
        return Response(ProductReadSerializer(dto).data)
