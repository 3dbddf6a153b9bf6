"""
URLs of the core app.

Location: core/urls.py

Auth, user profile and currency routes, mounted under /api/v1/.
"""
from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    path('auth/login', views.login_view, name='login'),
    path('auth/login/google', views.google_login_view, name='login-google'),
    path('user-profile', views.user_profile_view, name='user-profile'),
    path('currencies', views.currencies_view, name='currencies'),
    path('currencies/<str:code>', views.currency_detail_view, name='currency-detail'),
]
