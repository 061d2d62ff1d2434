from django.urls import path
from .views import AddressLookupView, ShippingQuoteView

urlpatterns = [
    path("quote/", ShippingQuoteView.as_view(), name="api-shipping-quote"),
    path("address/", AddressLookupView.as_view(), name="api-shipping-address"),
]
