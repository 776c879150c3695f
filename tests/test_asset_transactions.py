import pytest
from django.db import DatabaseError

from apps.common.exceptions import NotFound
from apps.common.services import AssetTransactionManager
from apps.players.models import Player
from apps.players.repositories import PlayerRepository
from apps.teams.models import Team
from apps.teams.repositories import TeamRepository


class FailingCreateRepository(TeamRepository):
    def create(self, data):
        super().create(data)
        raise DatabaseError("insert failed")


class FailingUpdateRepository(TeamRepository):
    def update(self, pk, data, conditions=None):
        super().update(pk, data, conditions)
        raise DatabaseError("update failed")


class FailingDeleteRepository(TeamRepository):
    def delete_one(self, pk, conditions=None):
        super().delete_one(pk, conditions)
        raise DatabaseError("delete failed")


def manager(blob_store, repository=None):
    return AssetTransactionManager(
        repository or TeamRepository(), blob_store, asset_field="logo_path", prefix=Team.LOGO_PATH
    )


@pytest.mark.django_db
def test_create_stores_asset_and_points_row_at_it(blob_store, image):
    team = manager(blob_store).create({"name": "Eagles"}, file=image("logo.png"))

    team.refresh_from_db()
    assert team.logo_path.startswith("logos/")
    assert blob_store.exists(team.logo_path)


@pytest.mark.django_db
def test_create_applies_scope_fields(blob_store, image, team_factory):
    team = team_factory()
    players = AssetTransactionManager(
        PlayerRepository(), blob_store, asset_field="profile_image_path", prefix=Player.PROFILE_IMAGE_PATH
    )
    player = players.create(
        {"first_name": "Jamie", "last_name": "Novak"}, file=image("p.png"), scope={"team_id": team.pk}
    )
    assert player.team_id == team.pk
    assert player.profile_image_path.startswith("profile-images/")


@pytest.mark.django_db
def test_failed_create_removes_written_file_and_row(blob_store, image):
    with pytest.raises(DatabaseError, match="insert failed"):
        manager(blob_store, FailingCreateRepository()).create({"name": "Eagles"}, file=image("logo.png"))

    assert Team.objects.count() == 0
    assert blob_store.list(Team.LOGO_PATH) == []


@pytest.mark.django_db
def test_failed_create_reports_original_error_when_cleanup_fails(blob_store, image, monkeypatch, caplog):
    def broken_delete(paths):
        raise RuntimeError("storage offline")

    monkeypatch.setattr(blob_store, "delete", broken_delete)

    with pytest.raises(DatabaseError, match="insert failed"):
        manager(blob_store, FailingCreateRepository()).create({"name": "Eagles"}, file=image("logo.png"))
    assert "Could not remove team asset" in caplog.text


@pytest.mark.django_db
def test_failed_file_write_creates_nothing(blob_store, image, monkeypatch):
    def broken_put(file, prefix):
        raise OSError("disk full")

    monkeypatch.setattr(blob_store, "put", broken_put)

    with pytest.raises(OSError):
        manager(blob_store).create({"name": "Eagles"}, file=image("logo.png"))
    assert Team.objects.count() == 0


@pytest.mark.django_db
def test_update_with_new_asset_replaces_old_after_commit(
    blob_store, image, team_factory, django_capture_on_commit_callbacks
):
    team = team_factory()
    old_path = team.logo_path

    with django_capture_on_commit_callbacks(execute=True):
        updated = manager(blob_store).update(team.pk, {"name": "Hawks"}, file=image("new.png"))

    updated.refresh_from_db()
    assert updated.name == "Hawks"
    assert updated.logo_path != old_path
    assert blob_store.exists(updated.logo_path)
    assert not blob_store.exists(old_path)


@pytest.mark.django_db
def test_update_keeps_old_asset_until_commit(
    blob_store, image, team_factory, django_capture_on_commit_callbacks
):
    team = team_factory()

    with django_capture_on_commit_callbacks() as callbacks:
        manager(blob_store).update(team.pk, {"name": "Hawks"}, file=image("new.png"))

    assert len(callbacks) == 1
    assert blob_store.exists(team.logo_path)


@pytest.mark.django_db
def test_update_without_asset_leaves_file_untouched(
    blob_store, read_blob, team_factory, django_capture_on_commit_callbacks
):
    team = team_factory()
    before = read_blob(team.logo_path)

    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        updated = manager(blob_store).update(team.pk, {"name": "Hawks"})

    assert callbacks == []
    assert updated.logo_path == team.logo_path
    assert read_blob(team.logo_path) == before


@pytest.mark.django_db
def test_failed_update_removes_new_file_and_keeps_old(
    blob_store, image, team_factory, django_capture_on_commit_callbacks
):
    team = team_factory("Eagles")

    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        with pytest.raises(DatabaseError, match="update failed"):
            manager(blob_store, FailingUpdateRepository()).update(
                team.pk, {"name": "Hawks"}, file=image("new.png")
            )

    assert callbacks == []
    team.refresh_from_db()
    assert team.name == "Eagles"
    assert blob_store.list(Team.LOGO_PATH) == [team.logo_path]


@pytest.mark.django_db
def test_update_of_missing_row_writes_nothing(blob_store, image):
    with pytest.raises(NotFound):
        manager(blob_store).update(404, {"name": "Hawks"}, file=image("new.png"))
    assert blob_store.list(Team.LOGO_PATH) == []


@pytest.mark.django_db
def test_update_respects_scope(blob_store, image, team_factory, player_factory):
    home, away = team_factory("Home"), team_factory("Away")
    player = player_factory(home)
    players = AssetTransactionManager(
        PlayerRepository(), blob_store, asset_field="profile_image_path", prefix=Player.PROFILE_IMAGE_PATH
    )

    with pytest.raises(NotFound):
        players.update(player.pk, {"first_name": "X"}, file=image("x.png"), scope={"team_id": away.pk})
    assert blob_store.list(Player.PROFILE_IMAGE_PATH) == [player.profile_image_path]


@pytest.mark.django_db
def test_delete_removes_row_then_asset(
    blob_store, team_factory, django_capture_on_commit_callbacks
):
    team = team_factory()

    with django_capture_on_commit_callbacks() as callbacks:
        assert manager(blob_store).delete(team.pk) == 1
        assert not Team.objects.filter(pk=team.pk).exists()
        # File stays until the transaction commits.
        assert blob_store.exists(team.logo_path)

    for callback in callbacks:
        callback()
    assert not blob_store.exists(team.logo_path)


@pytest.mark.django_db
def test_failed_delete_keeps_row_and_asset(
    blob_store, team_factory, django_capture_on_commit_callbacks
):
    team = team_factory()

    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        with pytest.raises(DatabaseError, match="delete failed"):
            manager(blob_store, FailingDeleteRepository()).delete(team.pk)

    assert callbacks == []
    assert Team.objects.filter(pk=team.pk).exists()
    assert blob_store.exists(team.logo_path)


@pytest.mark.django_db
def test_delete_of_missing_row_raises_not_found(blob_store):
    with pytest.raises(NotFound):
        manager(blob_store).delete("test")


@pytest.mark.django_db
def test_delete_cleanup_failure_is_only_logged(
    blob_store, team_factory, monkeypatch, caplog, django_capture_on_commit_callbacks
):
    team = team_factory()

    def broken_delete(paths):
        raise RuntimeError("storage offline")

    monkeypatch.setattr(blob_store, "delete", broken_delete)

    with django_capture_on_commit_callbacks(execute=True):
        assert manager(blob_store).delete(team.pk) == 1

    assert not Team.objects.filter(pk=team.pk).exists()
    assert "Could not remove team asset" in caplog.text
