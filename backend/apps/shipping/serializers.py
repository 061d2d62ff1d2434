from rest_framework import serializers


class PostalCodeSerializer(serializers.Serializer):
    zip_code = serializers.CharField(allow_blank=True, trim_whitespace=True)


class ShippingQuoteSerializer(serializers.Serializer):
    zone_name = serializers.CharField()
    shipping_cost = serializers.DecimalField(max_digits=10, decimal_places=2)
    collection_cost = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_shipping = serializers.DecimalField(max_digits=10, decimal_places=2)


class AddressInfoSerializer(serializers.Serializer):
    formatted_address = serializers.CharField(allow_blank=True)
    city = serializers.CharField(allow_blank=True)
    state = serializers.CharField(allow_blank=True)
    country = serializers.CharField(allow_blank=True)
    postal_code = serializers.CharField()
    full_address = serializers.CharField(allow_blank=True)
