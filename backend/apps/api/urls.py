from django.urls import path, include

urlpatterns = [
    path("products/", include("apps.catalog.urls")),
    path("cart/", include("apps.carts.urls")),
    path("shipping/", include("apps.shipping.urls")),
    path("orders/", include("apps.orders.urls")),
    path("orders/", include("apps.documents.urls")),
]
