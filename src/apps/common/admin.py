from django import forms
from django.contrib import admin


class AssetAdminForm(forms.ModelForm):
    """ModelForm with an image upload that is required when adding."""

    upload_field = ""

    def clean(self):
        cleaned = super().clean()
        if (
            self.instance._state.adding
            and not cleaned.get(self.upload_field)
            and self.upload_field not in self.errors
        ):
            label = self.upload_field.replace("_", " ")
            self.add_error(self.upload_field, f"The {label} field is required.")
        return cleaned


class AssetModelAdmin(admin.ModelAdmin):
    """
    Admin whose saves and deletes go through an AssetTransactionManager.

    The stored path is never editable: it is only ever set from an upload,
    so a row cannot point at a file that was not written.
    """

    form = AssetAdminForm
    data_fields: tuple[str, ...] = ()

    def asset_manager(self):
        raise NotImplementedError

    def asset_scope(self, obj):
        return None

    def save_model(self, request, obj, form, change):
        data = {field: getattr(obj, field) for field in self.data_fields}
        upload = form.cleaned_data.get(form.upload_field)
        manager = self.asset_manager()
        if change:
            saved = manager.update(obj.pk, data, file=upload, scope=self.asset_scope(obj))
        else:
            saved = manager.create(data, file=upload, scope=self.asset_scope(obj))

        # The admin keeps using `obj` for its log entry and redirect.
        for field in obj._meta.concrete_fields:
            setattr(obj, field.attname, getattr(saved, field.attname))
        obj._state.adding = False
        obj._state.db = saved._state.db

    def delete_model(self, request, obj):
        self.asset_manager().delete(obj.pk, scope=self.asset_scope(obj))

    def delete_queryset(self, request, queryset):
        manager = self.asset_manager()
        for obj in queryset:
            manager.delete(obj.pk, scope=self.asset_scope(obj))
