from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from apps.accounts.utils import ensure_group
from apps.common.images import placeholder_image
from apps.common.storage import get_blob_store
from apps.players.services import player_assets, team_scope
from apps.teams.services import team_assets

DEMO_TEAMS = ["Eagles", "Harbour City", "Northside FC", "Riverside Rovers", "Union Athletic"]
FIRST_NAMES = ["Alex", "Sam", "Jordan", "Casey", "Robin", "Jamie", "Morgan", "Riley"]
LAST_NAMES = ["Okafor", "Silva", "Novak", "Larsen", "Moreau", "Kim", "Byrne", "Costa"]


class Command(BaseCommand):
    help = "Seed an admin user plus demo teams and players with placeholder images"

    def add_arguments(self, parser):
        parser.add_argument("--teams", type=int, default=3)
        parser.add_argument("--players", type=int, default=5)
        parser.add_argument("--email", type=str, default="admin@example.com")
        parser.add_argument("--password", type=str, default="password123")

    def handle(self, *args, **options):
        user_model = get_user_model()
        email = options["email"]
        user, created = user_model.objects.get_or_create(
            username=email, defaults={"email": email, "first_name": "Demo Admin"}
        )
        if created:
            user.set_password(options["password"])
            user.save()
        user.groups.add(ensure_group(settings.ADMIN_GROUP))

        blob_store = get_blob_store()
        teams = team_assets(blob_store)
        players = player_assets(blob_store)

        team_count = options["teams"]
        player_count = options["players"]
        for index in range(team_count):
            name = DEMO_TEAMS[index % len(DEMO_TEAMS)]
            if index >= len(DEMO_TEAMS):
                name = f"{name} {index // len(DEMO_TEAMS) + 1}"
            team = teams.create({"name": name}, file=placeholder_image(f"team-{index}.png"))
            for number in range(player_count):
                players.create(
                    {
                        "first_name": FIRST_NAMES[(index + number) % len(FIRST_NAMES)],
                        "last_name": LAST_NAMES[(index * 3 + number) % len(LAST_NAMES)],
                    },
                    file=placeholder_image(f"player-{index}-{number}.png"),
                    scope=team_scope(team),
                )

        self.stdout.write(
            self.style.SUCCESS(
                f"Admin {email} ready. Created {team_count} team(s) with {player_count} player(s) each."
            )
        )
