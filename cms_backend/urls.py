"""
URL configuration for cms_backend project.
"""
from django.contrib import admin
from django.urls import path
from django.http import JsonResponse

from .views import health_check


def custom_404(request, exception=None):
    """Return JSON for 404 errors instead of HTML."""
    return JsonResponse({
        'error': 'Not found',
        'detail': 'The requested resource was not found.',
        'status': 404,
    }, status=404)


def custom_500(request):
    """Return JSON for 500 errors instead of HTML."""
    return JsonResponse({
        'error': 'Internal server error',
        'detail': 'An unexpected error occurred.',
        'status': 500,
    }, status=500)


urlpatterns = [
    path('admin/', admin.site.urls),
    path('health/', health_check, name='health'),
]

handler404 = custom_404
handler500 = custom_500
