from apps.common.repositories import Repository

from .models import Team


class TeamRepository(Repository[Team]):
    model = Team
