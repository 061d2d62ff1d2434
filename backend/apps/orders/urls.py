from django.urls import path
from .views import OrderDetailView, OrderListView, OrderPaymentConfirmView

urlpatterns = [
    path("", OrderListView.as_view(), name="api-orders-list"),
    path("<uuid:order_id>/", OrderDetailView.as_view(), name="api-orders-detail"),
    path(
        "<uuid:order_id>/confirm-payment/",
        OrderPaymentConfirmView.as_view(),
        name="api-orders-confirm-payment",
    ),
]
