import getpass

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.core.validators import validate_email

from apps.accounts.utils import ensure_group

NAME_MAX_LENGTH = 150


def validate_name(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError("The name field is required.")
    if len(value) > NAME_MAX_LENGTH:
        raise ValidationError(f"The name field must not be greater than {NAME_MAX_LENGTH} characters.")
    return value


def validate_new_email(value: str) -> str:
    value = (value or "").strip().lower()
    if not value:
        raise ValidationError("The email field is required.")
    validate_email(value)
    if get_user_model().objects.filter(email__iexact=value).exists():
        raise ValidationError("The email has already been taken.")
    return value


def validate_password(value: str) -> str:
    if not value:
        raise ValidationError("The password field is required.")
    if len(value) < 8:
        raise ValidationError("The password field must be at least 8 characters.")
    if not value.isalnum():
        raise ValidationError("The password field must only contain letters and numbers.")
    return value


class Command(BaseCommand):
    help = "Add a new API user. Missing values are prompted for."

    def add_arguments(self, parser):
        parser.add_argument("--name", type=str)
        parser.add_argument("--email", type=str)
        parser.add_argument("--password", type=str)
        parser.add_argument("--admin", action="store_true", default=None)
        parser.add_argument("--no-admin", dest="admin", action="store_false")
        parser.add_argument(
            "--no-input",
            dest="interactive",
            action="store_false",
            help="Fail instead of prompting when a value is missing or invalid.",
        )

    def handle(self, *args, **options):
        interactive = options["interactive"]
        name = self._field("name", options["name"], validate_name, interactive)
        email = self._field("email", options["email"], validate_new_email, interactive)
        password = self._field(
            "password", options["password"], validate_password, interactive, secret=True
        )
        admin = options["admin"]
        if admin is None:
            admin = interactive and self._confirm("Is this user an admin?")

        user = get_user_model().objects.create_user(
            username=email[:150], email=email, password=password, first_name=name
        )
        if admin:
            user.groups.add(ensure_group(settings.ADMIN_GROUP))

        self.stdout.write(
            self.style.SUCCESS(f"The user {name} (id:{user.pk}) has been created successfully.")
        )

    def _field(self, field, value, validator, interactive, secret=False):
        while True:
            if value is None:
                if not interactive:
                    raise CommandError(f"The {field} field is required.")
                value = self._ask(f"Enter the {field} of the user", secret)
            try:
                return validator(value)
            except ValidationError as exc:
                if not interactive:
                    raise CommandError(exc.messages[0]) from exc
                self.stderr.write(self.style.ERROR(exc.messages[0]))
                value = None

    def _ask(self, question, secret=False):
        if secret:
            return getpass.getpass(f"{question}: ")
        return input(f"{question}: ")

    def _confirm(self, question):
        return input(f"{question} [y/N]: ").strip().lower() in {"y", "yes"}
