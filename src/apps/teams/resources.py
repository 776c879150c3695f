from apps.common.storage import BlobStore

from .models import Team


def team_resource(team: Team, blob_store: BlobStore) -> dict:
    return {
        "id": team.pk,
        "name": team.name,
        "logo_url": blob_store.url_for(team.logo_path),
    }
