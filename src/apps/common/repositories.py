from __future__ import annotations

from typing import Any, Generic, TypeVar

from django.core.exceptions import ValidationError
from django.db import models

from .exceptions import NotFound

ModelT = TypeVar("ModelT", bound=models.Model)


class Repository(Generic[ModelT]):
    """
    CRUD over one model with optional equality filters.

    A filter (``{"team_id": 3}``) must match jointly with the primary key, so a
    child id looked up under the wrong parent is a miss. Every method runs in
    whatever ``transaction.atomic`` block the caller has open.
    """

    model: type[ModelT]

    def __init__(self, model: type[ModelT] | None = None):
        if model is not None:
            self.model = model

    def _queryset(self, conditions: dict[str, Any] | None = None) -> models.QuerySet:
        queryset = self.model._default_manager.all()
        if conditions:
            queryset = queryset.filter(**conditions)
        return queryset

    def _pk(self, pk):
        """Coerce a URL id to the pk type, or None when it can never match."""
        try:
            return self.model._meta.pk.to_python(pk)
        except (TypeError, ValueError, ValidationError):
            return None

    def list(self, conditions: dict[str, Any] | None = None) -> list[ModelT]:
        return list(self._queryset(conditions).order_by("pk"))

    def create(self, data: dict[str, Any]) -> ModelT:
        return self.model._default_manager.create(**data)

    def get_or_fail(self, pk, conditions: dict[str, Any] | None = None) -> ModelT:
        lookup = {"pk": pk, **(conditions or {})}
        value = self._pk(pk)
        if value is None:
            raise NotFound(self.model, lookup)
        try:
            return self._queryset(conditions).get(pk=value)
        except self.model.DoesNotExist as exc:
            raise NotFound(self.model, lookup) from exc

    def update(self, pk, data: dict[str, Any], conditions: dict[str, Any] | None = None) -> ModelT:
        instance = self.get_or_fail(pk, conditions)
        for field, value in data.items():
            setattr(instance, field, value)
        instance.save()
        return instance

    def delete_one(self, pk, conditions: dict[str, Any] | None = None) -> int:
        value = self._pk(pk)
        if value is None:
            return 0
        _, per_model = self._queryset(conditions).filter(pk=value).delete()
        return per_model.get(self.model._meta.label, 0)

    def delete_many(self, conditions: dict[str, Any]) -> int:
        _, per_model = self._queryset(conditions).delete()
        return per_model.get(self.model._meta.label, 0)
