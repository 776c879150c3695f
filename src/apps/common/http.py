import json
from functools import wraps

from django.http import HttpResponse, JsonResponse, QueryDict
from django.http.multipartparser import MultiPartParserError
from django.utils.datastructures import MultiValueDict
from django.views.decorators.csrf import csrf_exempt

from .exceptions import NotFound, ValidationFailure
from .logging import ErrorLogger, describe_payload

error_logger = ErrorLogger()


def message_response(message: str, status: int) -> JsonResponse:
    return JsonResponse({"message": message}, status=status)


def resource_response(data, status: int = 200) -> JsonResponse:
    return JsonResponse({"data": data}, status=status)


def validation_response(exc: ValidationFailure) -> JsonResponse:
    return JsonResponse({"message": exc.message, "errors": exc.errors}, status=422)


def no_content() -> HttpResponse:
    return HttpResponse(status=204)


def parse_request(request):
    """
    Return ``(data, files)`` for POST and PUT alike.

    Django only parses form bodies for POST, so PUT multipart/urlencoded
    bodies are parsed here. JSON bodies are accepted for payloads without
    files. The parsed values are kept on the request for error logging.
    """
    if hasattr(request, "api_data"):
        return request.api_data, request.api_files

    content_type = request.content_type
    files = MultiValueDict()
    try:
        if content_type == "application/json":
            data = json.loads(request.body or b"{}")
            if not isinstance(data, dict):
                raise ValueError("JSON body must be an object")
        elif request.method == "POST":
            data, files = request.POST, request.FILES
        elif content_type == "multipart/form-data":
            data, files = request.parse_file_upload(request.META, request)
        else:
            data = QueryDict(request.body, encoding=request.encoding)
    except (ValueError, MultiPartParserError) as exc:
        raise ValidationFailure({"body": ["The request body could not be parsed."]}) from exc

    request.api_data, request.api_files = data, files
    return data, files


def handle_errors(error_message: str):
    """
    Request boundary for one API action.

    NotFound and ValidationFailure become structured 404/422 responses. Any
    other exception is logged with its context and answered with a generic
    500 carrying `error_message`; internal details never reach the client.
    """

    def decorator(view_func):
        location = f"{view_func.__module__}.{view_func.__name__}"

        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            try:
                return view_func(request, *args, **kwargs)
            except NotFound as exc:
                return message_response(exc.message, 404)
            except ValidationFailure as exc:
                return validation_response(exc)
            except Exception as exc:
                error_logger.error(
                    exc,
                    error_message,
                    location=location,
                    params=dict(kwargs),
                    payload=describe_payload(
                        getattr(request, "api_data", None), getattr(request, "api_files", None)
                    ),
                )
                return message_response(error_message, 500)

        return _wrapped

    return decorator


def dispatch(**handlers):
    """Route one URL to a handler per HTTP method (``GET=..., POST=...``)."""

    @csrf_exempt
    def view(request, *args, **kwargs):
        handler = handlers.get(request.method)
        if handler is None:
            response = message_response("Method not allowed.", 405)
            response["Allow"] = ", ".join(sorted(handlers))
            return response
        return handler(request, *args, **kwargs)

    return view
