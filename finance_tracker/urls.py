"""
URL configuration for the finance_tracker project.

URL structure:
- /api/v1/ - REST endpoints (delegated to the apps through api.urls)
"""
from django.urls import path, include

urlpatterns = [
    path('api/v1/', include('api.urls')),
]
