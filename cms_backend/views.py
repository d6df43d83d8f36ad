"""
Project-level views (health check).
"""
import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


@require_GET
def health_check(request):
    """
    Liveness check for load balancers and monitoring.
    GET /health/ - 200 when the database answers, 503 otherwise.
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.error(f"Health check failed: {e}")
        return JsonResponse(
            {"status": "unavailable", "service": "cms-backend", "database": "error"},
            status=503,
        )
    return JsonResponse({"status": "ok", "service": "cms-backend", "database": connection.vendor})
