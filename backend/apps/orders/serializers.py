from rest_framework import serializers


class CustomerSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=50)
    company = serializers.CharField(max_length=255, required=False, allow_blank=True)
    event_name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    event_start_date = serializers.DateField(required=False, allow_null=True)
    event_end_date = serializers.DateField(required=False, allow_null=True)
    postal_code = serializers.CharField(max_length=10, required=False, allow_blank=True)
    shipping_address = serializers.CharField(required=False, allow_blank=True)
    message = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        start = attrs.get("event_start_date")
        end = attrs.get("event_end_date")
        if start and end and end < start:
            raise serializers.ValidationError(
                {"event_end_date": "Event end date cannot be before start date"}
            )
        return attrs


class OrderLineWriteSerializer(serializers.Serializer):
    product_id = serializers.CharField(max_length=64)
    title = serializers.CharField(max_length=255)
    unit_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    quantity = serializers.IntegerField(min_value=1)
    category = serializers.CharField(required=False, allow_blank=True)


class ShippingChargesSerializer(serializers.Serializer):
    zone_name = serializers.CharField(required=False, allow_blank=True)
    shipping_cost = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    collection_cost = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)


class OrderCreateSerializer(serializers.Serializer):
    customer = CustomerSerializer()
    items = OrderLineWriteSerializer(many=True, required=False)
    shipping = ShippingChargesSerializer()
    subtotal = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True
    )
    quote_only = serializers.BooleanField(required=False, default=False)


class OrderReceiptSerializer(serializers.Serializer):
    order_id = serializers.CharField()
    order_number = serializers.CharField()
    status = serializers.CharField()
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)
    shipping_cost = serializers.DecimalField(max_digits=10, decimal_places=2)
    collection_cost = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    redirect_url = serializers.CharField(allow_null=True)


class OrderItemReadSerializer(serializers.Serializer):
    product_id = serializers.CharField()
    title = serializers.CharField()
    unit_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    quantity = serializers.IntegerField()
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2)


class OrderReadSerializer(serializers.Serializer):
    id = serializers.CharField()
    order_number = serializers.CharField()
    customer_name = serializers.CharField()
    customer_email = serializers.CharField()
    customer_phone = serializers.CharField()
    company_name = serializers.CharField(allow_blank=True)
    event_name = serializers.CharField(allow_blank=True)
    event_start_date = serializers.DateField(allow_null=True)
    event_end_date = serializers.DateField(allow_null=True)
    postal_code = serializers.CharField(allow_blank=True)
    shipping_address = serializers.CharField(allow_blank=True)
    message = serializers.CharField(allow_blank=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)
    shipping_cost = serializers.DecimalField(max_digits=10, decimal_places=2)
    collection_cost = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    status = serializers.CharField()
    created_at = serializers.DateTimeField(allow_null=True)
    items = OrderItemReadSerializer(many=True)


class PaymentConfirmSerializer(serializers.Serializer):
    session_id = serializers.CharField(required=False, allow_blank=True)
