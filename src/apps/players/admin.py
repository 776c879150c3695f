from django.contrib import admin

from apps.common.admin import AssetAdminForm, AssetModelAdmin
from apps.common.forms import image_field

from .models import Player
from .services import player_assets


class PlayerAdminForm(AssetAdminForm):
    upload_field = "profile_image"

    profile_image = image_field("profile_image", required=False)

    class Meta:
        model = Player
        fields = ("team", "first_name", "last_name")


@admin.register(Player)
class PlayerAdmin(AssetModelAdmin):
    form = PlayerAdminForm
    data_fields = ("first_name", "last_name")
    list_display = ("first_name", "last_name", "team", "profile_image_path", "created_at")
    list_filter = ("team", "created_at")
    search_fields = ("first_name", "last_name", "team__name")
    fields = ("team", "first_name", "last_name", "profile_image", "profile_image_path")

    def get_readonly_fields(self, request, obj=None):
        # A player never changes team once created.
        if obj is not None:
            return ("team", "profile_image_path")
        return ("profile_image_path",)

    def asset_manager(self):
        return player_assets()

    def asset_scope(self, obj):
        return {"team_id": obj.team_id}
