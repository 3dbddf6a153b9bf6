"""
URLs of the finance app.

Location: finance/urls.py

Category, transaction and dashboard routes, mounted under /api/v1/.
"""
from django.urls import path
from . import views

app_name = 'finance'

urlpatterns = [
    path('categories', views.categories_view, name='categories'),
    path('categories/<str:category_id>', views.category_detail_view, name='category-detail'),
    path('transactions', views.transactions_view, name='transactions'),
    path('transactions/<str:transaction_id>', views.transaction_detail_view, name='transaction-detail'),
    path('dashboard/summary', views.dashboard_summary_view, name='dashboard-summary'),
]
