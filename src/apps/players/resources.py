from apps.common.storage import BlobStore

from .models import Player


def player_resource(player: Player, blob_store: BlobStore) -> dict:
    return {
        "id": player.pk,
        "team_id": player.team_id,
        "first_name": player.first_name,
        "last_name": player.last_name,
        "profile_image_url": blob_store.url_for(player.profile_image_path),
    }
