from django.urls import path

from modules.core.views import ErrorProbeView, health_check

urlpatterns = [
    path("health", health_check, name="health_check"),
    path("actuator/test-error", ErrorProbeView.as_view(), name="error_probe"),
]
