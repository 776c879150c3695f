class NotFound(Exception):
    """No row matched the requested id (and scope filter)."""

    def __init__(self, model=None, lookup=None):
        self.model = model
        self.lookup = lookup or {}
        super().__init__(self.message)

    @property
    def resource_name(self) -> str:
        if self.model is None:
            return "Resource"
        return self.model._meta.object_name

    @property
    def message(self) -> str:
        return f"{self.resource_name} not found."


class ValidationFailure(Exception):
    """Malformed or missing request fields, keyed by field name."""

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = {field: list(messages) for field, messages in errors.items()}
        super().__init__(self.message)

    @property
    def message(self) -> str:
        for messages in self.errors.values():
            if messages:
                return messages[0]
        return "The given data was invalid."


class AuthenticationRequired(Exception):
    message = "Unauthenticated."


class AuthorizationDenied(Exception):
    message = "Access denied."
