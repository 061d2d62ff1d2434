from django.urls import path
from .views import OrderDocumentView, OrderEmailPreviewView

urlpatterns = [
    path(
        "<uuid:order_id>/documents/<str:document_type>/",
        OrderDocumentView.as_view(),
        name="api-orders-document",
    ),
    path(
        "<uuid:order_id>/emails/<str:kind>/",
        OrderEmailPreviewView.as_view(),
        name="api-orders-email",
    ),
]
