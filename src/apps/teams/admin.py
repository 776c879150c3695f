from django.contrib import admin

from apps.common.admin import AssetAdminForm, AssetModelAdmin
from apps.common.forms import image_field
from apps.players.models import Player

from .models import Team
from .services import TeamCascadeDeleter, team_assets


class TeamAdminForm(AssetAdminForm):
    upload_field = "logo"

    logo = image_field("logo", required=False)

    class Meta:
        model = Team
        fields = ("name",)


class PlayerInline(admin.TabularInline):
    """Read-only roster; players are added and removed on their own admin page."""

    model = Player
    extra = 0
    can_delete = False
    show_change_link = True
    fields = ("first_name", "last_name", "profile_image_path")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Team)
class TeamAdmin(AssetModelAdmin):
    form = TeamAdminForm
    data_fields = ("name",)
    list_display = ("name", "logo_path", "created_at", "updated_at")
    search_fields = ("name",)
    fields = ("name", "logo", "logo_path")
    readonly_fields = ("logo_path",)
    inlines = [PlayerInline]

    def asset_manager(self):
        return team_assets()

    def delete_model(self, request, obj):
        TeamCascadeDeleter().delete(obj.pk)

    def delete_queryset(self, request, queryset):
        deleter = TeamCascadeDeleter()
        for team in queryset:
            deleter.delete(team.pk)
