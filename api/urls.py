"""
URLs of the API.

Location: api/urls.py

Centralises every REST route under /api/v1/.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('core.urls')),
    path('', include('finance.urls')),
]
