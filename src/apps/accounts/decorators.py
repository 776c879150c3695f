from functools import wraps

from apps.common.exceptions import AuthenticationRequired, AuthorizationDenied
from apps.common.http import message_response

from .models import AccessToken
from .utils import bearer_token, is_admin


def token_required(view_func):
    """Authenticate the request from its bearer token; 401 otherwise."""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        plain = bearer_token(request)
        token = AccessToken.objects.resolve(plain) if plain else None
        if token is None:
            return message_response(AuthenticationRequired.message, 401)
        token.touch()
        request.user = token.user
        request.access_token = token
        return view_func(request, *args, **kwargs)

    return _wrapped


def admin_required(view_func):
    @token_required
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not is_admin(request.user):
            return message_response(AuthorizationDenied.message, 403)
        return view_func(request, *args, **kwargs)

    return _wrapped
