from rest_framework import serializers


class HtmlDocumentSerializer(serializers.Serializer):
    html = serializers.CharField()
    filename = serializers.CharField()
    error = serializers.CharField(allow_null=True)


class EmailPreviewSerializer(serializers.Serializer):
    kind = serializers.CharField()
    html = serializers.CharField()
