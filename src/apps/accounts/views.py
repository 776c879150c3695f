from django import forms
from django.conf import settings
from django.contrib.auth import get_user_model
from django.http import JsonResponse

from apps.common.exceptions import ValidationFailure
from apps.common.forms import ApiForm
from apps.common.http import dispatch, handle_errors, no_content, parse_request

from .decorators import token_required
from .models import AccessToken


class LoginForm(ApiForm):
    email = forms.EmailField(
        max_length=255,
        error_messages={
            "required": "The email field is required.",
            "invalid": "The email field must be a valid email address.",
        },
    )
    password = forms.CharField(
        strip=False,
        error_messages={"required": "The password field is required."},
    )


@handle_errors("Error while logging in.")
def login(request):
    data, _ = parse_request(request)
    cleaned = LoginForm(data).validated()

    user = get_user_model().objects.filter(email__iexact=cleaned["email"]).first()
    if user is None or not user.is_active or not user.check_password(cleaned["password"]):
        raise ValidationFailure({"email": ["The provided credentials are incorrect."]})

    _, plain = AccessToken.objects.issue(user, name=settings.ACCESS_TOKEN_NAME)
    return JsonResponse({"access_token": plain, "token_type": "Bearer"})


@token_required
@handle_errors("Error while logging out.")
def logout(request):
    request.access_token.delete()
    return no_content()


login_view = dispatch(POST=login)
logout_view = dispatch(DELETE=logout)
