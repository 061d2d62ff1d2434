from django.urls import path
from .views import CartDatesView, CartItemsView, CartView, CartVisibilityView

urlpatterns = [
    path("", CartView.as_view(), name="api-cart"),
    path("items/", CartItemsView.as_view(), name="api-cart-items"),
    path("dates/", CartDatesView.as_view(), name="api-cart-dates"),
    path("open/", CartVisibilityView.as_view(panel_action="open"), name="api-cart-open"),
    path("close/", CartVisibilityView.as_view(panel_action="close"), name="api-cart-close"),
]
