import logging

from apps.common.logging import ErrorLogger
from apps.common.services import AssetTransactionManager
from apps.common.storage import BlobStore, get_blob_store

from .models import Player
from .repositories import PlayerRepository

logger = logging.getLogger(__name__)


def player_assets(blob_store: BlobStore | None = None) -> AssetTransactionManager:
    return AssetTransactionManager(
        PlayerRepository(),
        blob_store or get_blob_store(),
        asset_field="profile_image_path",
        prefix=Player.PROFILE_IMAGE_PATH,
        error_logger=ErrorLogger(logger),
    )


def team_scope(team) -> dict:
    """Players are only ever resolved together with their team."""
    return {"team_id": team.pk}
