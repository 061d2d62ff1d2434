from rest_framework import serializers


class CartLineSerializer(serializers.Serializer):
    product_id = serializers.CharField()
    title = serializers.CharField()
    unit_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    category = serializers.CharField(allow_blank=True)
    image_ref = serializers.CharField(allow_blank=True)
    quantity = serializers.IntegerField()
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2)


class CartReadSerializer(serializers.Serializer):
    items = CartLineSerializer(many=True)
    is_open = serializers.BooleanField()
    rental_start_date = serializers.DateField(allow_null=True)
    rental_end_date = serializers.DateField(allow_null=True)
    last_added_id = serializers.CharField(allow_null=True)
    total_items = serializers.IntegerField()
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2)


class CartAddItemSerializer(serializers.Serializer):
    product_id = serializers.CharField()
    quantity = serializers.IntegerField(required=False, default=1)
    bundle_size = serializers.IntegerField(required=False, allow_null=True, min_value=1)


class CartLineRefSerializer(serializers.Serializer):
    product_id = serializers.CharField()
    category = serializers.CharField(allow_blank=True)


class CartQuantitySerializer(CartLineRefSerializer):
    quantity = serializers.IntegerField()


class RentalDatesSerializer(serializers.Serializer):
    rental_start_date = serializers.DateField(allow_null=True, required=False)
    rental_end_date = serializers.DateField(allow_null=True, required=False)
