from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from apps.common.storage import get_blob_store
from apps.players.models import Player
from apps.teams.models import Team


class Command(BaseCommand):
    help = "Delete stored images that no team or player references any more"

    def add_arguments(self, parser):
        parser.add_argument("--dry-run", action="store_true")
        parser.add_argument(
            "--min-age-minutes",
            type=int,
            default=60,
            help="Skip files younger than this; they may belong to a write still in flight.",
        )

    def handle(self, *args, **options):
        dry_run = options["dry_run"]
        cutoff = timezone.now() - timedelta(minutes=options["min_age_minutes"])
        blob_store = get_blob_store()

        referenced = set(Team.objects.values_list("logo_path", flat=True))
        referenced.update(Player.objects.values_list("profile_image_path", flat=True))

        orphans = []
        for prefix in (Team.LOGO_PATH, Player.PROFILE_IMAGE_PATH):
            for path in blob_store.list(prefix):
                if path in referenced or blob_store.modified_at(path) > cutoff:
                    continue
                orphans.append(path)

        for path in orphans:
            self.stdout.write(f"orphan {path}")
        if not dry_run:
            blob_store.delete(orphans)

        action = "Found" if dry_run else "Deleted"
        self.stdout.write(f"{action}={len(orphans)}")
