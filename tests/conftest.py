import pytest
from django.conf import settings as django_settings
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.test import Client
from django.test.client import BOUNDARY, MULTIPART_CONTENT, encode_multipart

from apps.accounts.models import AccessToken
from apps.common.images import placeholder_image
from apps.common.storage import BlobStore
from apps.players.services import player_assets, team_scope
from apps.teams.services import team_assets


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / "media"
    settings.PUBLIC_BASE_URL = "http://testserver"
    return settings.MEDIA_ROOT


@pytest.fixture
def blob_store(media_root):
    return BlobStore()


@pytest.fixture
def read_blob(blob_store):
    def _read(path):
        with blob_store.storage.open(path, "rb") as handle:
            return handle.read()

    return _read


@pytest.fixture
def image():
    def _create(name="image.png", size=(32, 32)):
        return placeholder_image(name, size=size)

    return _create


@pytest.fixture
def admin_group(db):
    group, _ = Group.objects.get_or_create(name=django_settings.ADMIN_GROUP)
    return group


@pytest.fixture
def user_factory(db, admin_group):
    def _create(email, password="password123", admin=False):
        user = get_user_model().objects.create_user(
            username=email, email=email, password=password, first_name="Test"
        )
        if admin:
            user.groups.add(admin_group)
        return user

    return _create


@pytest.fixture
def admin_user(user_factory):
    return user_factory("admin@example.com", admin=True)


@pytest.fixture
def regular_user(user_factory):
    return user_factory("fan@example.com")


def _token_client(user):
    _, plain = AccessToken.objects.issue(user, name="test")
    return Client(HTTP_AUTHORIZATION=f"Bearer {plain}")


@pytest.fixture
def admin_client(admin_user):
    return _token_client(admin_user)


@pytest.fixture
def user_client(regular_user):
    return _token_client(regular_user)


@pytest.fixture
def put_multipart():
    def _put(client, url, data):
        return client.put(url, data=encode_multipart(BOUNDARY, data), content_type=MULTIPART_CONTENT)

    return _put


@pytest.fixture
def team_factory(db, blob_store):
    def _create(name="Eagles", players=0):
        team = team_assets(blob_store).create({"name": name}, file=placeholder_image("logo.png"))
        for number in range(players):
            player_assets(blob_store).create(
                {"first_name": f"First {number}", "last_name": f"Last {number}"},
                file=placeholder_image(f"player-{number}.png"),
                scope=team_scope(team),
            )
        return team

    return _create


@pytest.fixture
def player_factory(db, blob_store):
    def _create(team, first_name="Jamie", last_name="Novak"):
        return player_assets(blob_store).create(
            {"first_name": first_name, "last_name": last_name},
            file=placeholder_image("profile.png"),
            scope=team_scope(team),
        )

    return _create
