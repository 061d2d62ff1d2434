from django.http import HttpResponse
from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.common import get_logger
from .container import build_document_service
from .renderer import InvalidDocumentTypeError
from .serializers import EmailPreviewSerializer, HtmlDocumentSerializer
from .services import DocumentOrderNotFoundError

logger = get_logger(__name__).bind(component="documents", layer="view")


@extend_schema(tags=["Documents"])
class OrderDocumentView(APIView):
    service = build_document_service()
    log = logger.bind(view="OrderDocumentView")

    @extend_schema(
        summary="Download quote or receipt",
        description=(
            "Returns the document as a PDF attachment. When the PDF service is unavailable "
            "the rendered HTML is returned as JSON together with the reason."
        ),
        parameters=[
            OpenApiParameter("order_id", str, OpenApiParameter.PATH),
            OpenApiParameter(
                "document_type", str, OpenApiParameter.PATH, enum=["quote", "receipt"]
            ),
        ],
        responses={
            (200, "application/pdf"): OpenApiResponse(description="PDF document"),
            (200, "application/json"): HtmlDocumentSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, order_id, document_type: str):
        try:
            document = self.service.generate(order_id, document_type)
        except InvalidDocumentTypeError as exc:
            return error_response(
                "VALIDATION_ERROR", str(exc), {"document_type": document_type}
            )
        except DocumentOrderNotFoundError:
            return error_response("NOT_FOUND", "Order not found", {"id": str(order_id)})
        if document.is_pdf:
            response = HttpResponse(document.content, content_type=document.content_type)
            response["Content-Disposition"] = f'attachment; filename="{document.filename}"'
            return response
        payload = {
            "html": document.content.decode("utf-8"),
            "filename": document.filename,
            "error": document.error,
        }
        return Response(HtmlDocumentSerializer(payload).data)


@extend_schema(tags=["Documents"])
class OrderEmailPreviewView(APIView):
    service = build_document_service()
    log = logger.bind(view="OrderEmailPreviewView")

    @extend_schema(
        summary="Preview order email",
        parameters=[
            OpenApiParameter("order_id", str, OpenApiParameter.PATH),
            OpenApiParameter(
                "kind", str, OpenApiParameter.PATH, enum=["confirmation", "thank_you"]
            ),
        ],
        responses={
            200: EmailPreviewSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, order_id, kind: str):
        try:
            html = self.service.render_email(order_id, kind)
        except InvalidDocumentTypeError as exc:
            return error_response("VALIDATION_ERROR", str(exc), {"kind": kind})
        except DocumentOrderNotFoundError:
            return error_response("NOT_FOUND", "Order not found", {"id": str(order_id)})
        return Response(EmailPreviewSerializer({"kind": kind, "html": html}).data)
