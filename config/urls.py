# config/urls.py
"""
URL configuration for Maintenance Service
"""

from django.conf import settings
from django.contrib import admin
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.urls import path, include


def health_check(request):
    return JsonResponse({'status': 'ok', 'service': settings.SERVICE_NAME})


def readiness_check(request):
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError as e:
        return JsonResponse({'status': 'not_ready', 'error': str(e)}, status=503)
    return JsonResponse({'status': 'ready', 'service': settings.SERVICE_NAME})


urlpatterns = [
    path('admin/', admin.site.urls),
    path('health/', health_check, name='health_check'),
    path('ready/', readiness_check, name='readiness_check'),
    path('api/v1/', include('apps.api.urls', namespace='api')),
]
