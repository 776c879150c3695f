import logging

from django.db import transaction

from apps.common.logging import ErrorLogger
from apps.common.services import AssetTransactionManager
from apps.common.storage import BlobStore, get_blob_store
from apps.players.repositories import PlayerRepository

from .models import Team
from .repositories import TeamRepository

logger = logging.getLogger(__name__)


def team_assets(blob_store: BlobStore | None = None) -> AssetTransactionManager:
    return AssetTransactionManager(
        TeamRepository(),
        blob_store or get_blob_store(),
        asset_field="logo_path",
        prefix=Team.LOGO_PATH,
        error_logger=ErrorLogger(logger),
    )


class TeamCascadeDeleter:
    """
    Deletes a team, its players, and every image they reference.

    Rows go in one transaction; the files are removed only once that
    transaction has committed.
    """

    def __init__(
        self,
        teams: TeamRepository | None = None,
        players: PlayerRepository | None = None,
        blob_store: BlobStore | None = None,
        error_logger: ErrorLogger | None = None,
    ):
        self.teams = teams or TeamRepository()
        self.players = players or PlayerRepository()
        self.blob_store = blob_store or get_blob_store()
        self.error_logger = error_logger or ErrorLogger(logger)

    def delete(self, team_id) -> int:
        team = self.teams.get_or_fail(team_id)
        paths = [*self.players.asset_paths(team.pk), team.logo_path]

        with transaction.atomic():
            deleted_players = self.players.delete_many({"team_id": team.pk})
            self.teams.delete_one(team.pk)
            transaction.on_commit(lambda: self._remove_assets(team.pk, paths))

        self.error_logger.info("Deleted team %s with %s player(s)", team.pk, deleted_players)
        return deleted_players

    def _remove_assets(self, team_id, paths) -> None:
        try:
            self.blob_store.delete(paths)
        except Exception:
            self.error_logger.warning(
                "Could not remove %s asset(s) of deleted team %s", len(paths), team_id, exc_info=True
            )
