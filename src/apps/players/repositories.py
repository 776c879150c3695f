from apps.common.repositories import Repository

from .models import Player


class PlayerRepository(Repository[Player]):
    model = Player

    def for_team(self, team) -> list[Player]:
        players = self.list({"team_id": team.pk})
        for player in players:
            player.team = team
        return players

    def asset_paths(self, team_id) -> list[str]:
        return list(
            self._queryset({"team_id": team_id})
            .order_by("pk")
            .values_list("profile_image_path", flat=True)
        )
