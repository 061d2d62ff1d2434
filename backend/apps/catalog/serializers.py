from rest_framework import serializers


class BundleOptionSerializer(serializers.Serializer):
    size = serializers.IntegerField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    category = serializers.CharField()


class ProductReadSerializer(serializers.Serializer):
    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    category = serializers.CharField()
    image_url = serializers.CharField(allow_blank=True)
    is_active = serializers.BooleanField()
    bundle_options = BundleOptionSerializer(many=True)
