from functools import wraps

from django.views.decorators.csrf import csrf_exempt

from core.exceptions import MethodNotAllowedException


def api_view(*methods):
    """
    Decorator for JSON API views.

    Rejects any method not listed with a 405 envelope and exempts the view
    from CSRF checks (the API is authenticated by bearer token, not cookies).

    Example usage:
        @api_view('GET', 'POST')
        def categories_view(request):
            ...
    """
    allowed = {m.upper() for m in methods}

    def decorator(view_func):
        @csrf_exempt
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if request.method not in allowed:
                raise MethodNotAllowedException.for_method(request.method)
            return view_func(request, *args, **kwargs)
        return wrapper
    return decorator
