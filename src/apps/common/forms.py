from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible

from .exceptions import ValidationFailure


def _label(name: str) -> str:
    return name.replace("_", " ")


@deconstructible
class MaxUploadSizeValidator:
    def __init__(self, max_kb: int, message: str):
        self.max_kb = max_kb
        self.message = message

    def __call__(self, upload):
        if upload.size > self.max_kb * 1024:
            raise ValidationError(self.message, code="max_size")

    def __eq__(self, other):
        return (
            isinstance(other, MaxUploadSizeValidator)
            and self.max_kb == other.max_kb
            and self.message == other.message
        )


class ImageInput(forms.FileInput):
    """Reports a plain form value under an image field as-is so it fails as "not an image"."""

    def value_from_datadict(self, data, files, name):
        upload = files.get(name)
        if upload is None:
            value = data.get(name)
            if value not in (None, ""):
                return value
        return upload


def text_field(name: str, max_length: int = 255) -> forms.CharField:
    label = _label(name)
    return forms.CharField(
        max_length=max_length,
        error_messages={
            "required": f"The {label} field is required.",
            "max_length": f"The {label} field must not be greater than {max_length} characters.",
        },
    )


def image_field(name: str, required: bool = True) -> forms.ImageField:
    label = _label(name)
    max_kb = settings.UPLOAD_MAX_KB
    not_an_image = f"The {label} field must be an image."
    return forms.ImageField(
        required=required,
        widget=ImageInput,
        validators=[
            MaxUploadSizeValidator(
                max_kb, f"The {label} field must not be greater than {max_kb} kilobytes."
            )
        ],
        error_messages={
            "required": f"The {label} field is required.",
            "invalid": not_an_image,
            "invalid_image": not_an_image,
            "invalid_extension": not_an_image,
            "empty": not_an_image,
            "missing": not_an_image,
        },
    )


class ApiForm(forms.Form):
    """Form whose failures surface as a ValidationFailure for the API boundary."""

    def validated(self) -> dict:
        if not self.is_valid():
            raise ValidationFailure(
                {field: [str(message) for message in messages] for field, messages in self.errors.items()}
            )
        return self.cleaned_data
