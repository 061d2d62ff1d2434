from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.http import JsonResponse, HttpResponse
from pathlib import Path
from apps.common.views import live_health, ready_health
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("apps.api.urls")),
    path("health/live", live_health, name="health-live"),
    path("health/ready", ready_health, name="health-ready"),
]

# In DEBUG the schema is generated on the fly; otherwise the exported file is served.
if settings.DEBUG:
    urlpatterns += [
        path("schema/", SpectacularAPIView.as_view(), name="schema"),
        path("docs/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    ]
else:

    def _static_schema(request):  # pragma: no cover (simple IO)
        file_path = Path(settings.BASE_DIR) / "static" / settings.OPENAPI_STATIC_JSON
        if not file_path.exists():
            return JsonResponse(
                {
                    "error": "schema_not_found",
                    "message": "Static schema not found. Export it with manage.py spectacular.",
                },
                status=404,
            )
        return HttpResponse(file_path.read_text(), content_type="application/json")

    urlpatterns += [
        path("schema/", _static_schema, name="schema"),
        path("docs/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    ]
