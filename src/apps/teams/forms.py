from apps.common.forms import ApiForm, image_field, text_field


class StoreTeamForm(ApiForm):
    name = text_field("name")
    logo = image_field("logo")


class UpdateTeamForm(ApiForm):
    name = text_field("name")
    logo = image_field("logo", required=False)
