"""
Views of the finance app.

Location: finance/views.py

Categories, transactions and the dashboard summary, mounted under /api/v1/.
Every route takes the acting user as the userId query parameter (the
transaction create route takes it in the body).
"""
from http import HTTPStatus

from core.decorators import api_view
from core.responses import api_response
from core.utils.http import parse_json_body, require_param, validated
from finance.forms import CategoryForm, CreateTransactionForm, PageForm, TransactionForm
from finance.services import CategoryService, DashboardService, TransactionService


# ========================================
# CATEGORIES
# ========================================

@api_view('GET', 'POST')
def categories_view(request):
    """
    GET  /api/v1/categories?userId&page=0&size=10&searchTerm=
    POST /api/v1/categories?userId  Body: {"name": "..."}
    """
    user_id = require_param(request, 'userId')
    service = CategoryService()

    if request.method == 'GET':
        paging = validated(PageForm, request.GET)
        return api_response(service.list_categories(
            user_id, paging['page'], paging['size'], request.GET.get('searchTerm')))

    data = validated(CategoryForm, parse_json_body(request))
    return api_response(service.create_category(user_id, data['name']), HTTPStatus.CREATED)


@api_view('PUT', 'DELETE')
def category_detail_view(request, category_id):
    """
    PUT    /api/v1/categories/{id}?userId  Body: {"name": "..."}
    DELETE /api/v1/categories/{id}?userId
    """
    user_id = require_param(request, 'userId')
    service = CategoryService()

    if request.method == 'DELETE':
        service.delete_category(category_id, user_id)
        return api_response(None)

    data = validated(CategoryForm, parse_json_body(request))
    return api_response(service.update_category(category_id, user_id, data['name']))


# ========================================
# TRANSACTIONS
# ========================================

@api_view('GET', 'POST')
def transactions_view(request):
    """
    GET  /api/v1/transactions?userId&page=0&size=10
    POST /api/v1/transactions  Body: {userId, amount, description, category, date, transactionType}
    """
    service = TransactionService()

    if request.method == 'GET':
        user_id = require_param(request, 'userId')
        paging = validated(PageForm, request.GET)
        return api_response(service.list_transactions(user_id, paging['page'], paging['size']))

    data = validated(CreateTransactionForm, parse_json_body(request))
    return api_response(service.create_transaction(data, data['userId']), HTTPStatus.CREATED)


@api_view('GET', 'PUT', 'DELETE')
def transaction_detail_view(request, transaction_id):
    """
    GET    /api/v1/transactions/{id}?userId
    PUT    /api/v1/transactions/{id}?userId  Body: full transaction
    DELETE /api/v1/transactions/{id}?userId  (returns the deleted transaction)
    """
    user_id = require_param(request, 'userId')
    service = TransactionService()

    if request.method == 'GET':
        return api_response(service.get_transaction(transaction_id, user_id))

    if request.method == 'DELETE':
        return api_response(service.delete_transaction(transaction_id, user_id))

    data = validated(TransactionForm, parse_json_body(request))
    return api_response(service.update_transaction(transaction_id, data, user_id))


# ========================================
# DASHBOARD
# ========================================

@api_view('GET')
def dashboard_summary_view(request):
    """GET /api/v1/dashboard/summary?userId&page=0&size=10"""
    user_id = require_param(request, 'userId')
    paging = validated(PageForm, request.GET)
    return api_response(DashboardService().get_summary(user_id, paging['page'], paging['size']))
