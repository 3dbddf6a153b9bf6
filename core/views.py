"""
Views of the core app.

Location: core/views.py

Views are the controllers of the application. They:
- Parse and validate the request
- Call services for the business logic
- Wrap the result in the {data, status} envelope

They hold no business logic. Domain exceptions propagate to
ExceptionHandlingMiddleware.
"""
from core.decorators import api_view
from core.forms import LoginForm, GoogleLoginForm, UserProfileForm
from core.responses import api_response
from core.services.auth_service import AuthService
from core.services.currency_service import CurrencyService
from core.services.user_service import UserService
from core.utils.http import parse_json_body, require_param, validated


@api_view('POST')
def login_view(request):
    """
    POST /api/v1/auth/login
    Body: {"phoneNumber": "9876543210"}
    """
    data = validated(LoginForm, parse_json_body(request))
    return api_response(AuthService().login(data['phoneNumber']))


@api_view('POST')
def google_login_view(request):
    """
    POST /api/v1/auth/login/google
    Body: {"idToken": "..."}
    """
    data = validated(GoogleLoginForm, parse_json_body(request))
    return api_response(AuthService().login_with_google(data['idToken']))


@api_view('GET', 'PUT')
def user_profile_view(request):
    """
    GET /api/v1/user-profile?userId=...
    PUT /api/v1/user-profile?userId=...  Body: {name, email, address, currency?}
    """
    user_id = require_param(request, 'userId')
    service = UserService()

    if request.method == 'GET':
        return api_response(service.get_profile(user_id))

    data = validated(UserProfileForm, parse_json_body(request))
    return api_response(service.update_profile(user_id, data))


@api_view('GET')
def currencies_view(request):
    """GET /api/v1/currencies"""
    return api_response(CurrencyService().list_active_currencies())


@api_view('GET')
def currency_detail_view(request, code):
    """GET /api/v1/currencies/{code}"""
    return api_response(CurrencyService().get_by_code(code))
