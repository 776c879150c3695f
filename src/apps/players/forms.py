from apps.common.forms import ApiForm, image_field, text_field


class StorePlayerForm(ApiForm):
    first_name = text_field("first_name")
    last_name = text_field("last_name")
    profile_image = image_field("profile_image")


class UpdatePlayerForm(ApiForm):
    first_name = text_field("first_name")
    last_name = text_field("last_name")
    profile_image = image_field("profile_image", required=False)
