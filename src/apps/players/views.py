from apps.accounts.decorators import admin_required
from apps.common.http import dispatch, handle_errors, no_content, parse_request, resource_response
from apps.common.storage import get_blob_store
from apps.teams.repositories import TeamRepository

from .forms import StorePlayerForm, UpdatePlayerForm
from .repositories import PlayerRepository
from .resources import player_resource
from .services import player_assets, team_scope


@handle_errors("Error while getting all the player details.")
def player_index(request, team):
    team = TeamRepository().get_or_fail(team)
    blob_store = get_blob_store()
    return resource_response(
        [player_resource(player, blob_store) for player in PlayerRepository().for_team(team)]
    )


@admin_required
@handle_errors("Error while storing the player details.")
def player_store(request, team):
    data, files = parse_request(request)
    cleaned = StorePlayerForm(data, files).validated()
    team = TeamRepository().get_or_fail(team)

    blob_store = get_blob_store()
    player = player_assets(blob_store).create(
        {"first_name": cleaned["first_name"], "last_name": cleaned["last_name"]},
        file=cleaned["profile_image"],
        scope=team_scope(team),
    )
    return resource_response(player_resource(player, blob_store), status=201)


@handle_errors("Error while getting the player details.")
def player_show(request, team, player):
    team = TeamRepository().get_or_fail(team)
    player = PlayerRepository().get_or_fail(player, team_scope(team))
    return resource_response(player_resource(player, get_blob_store()))


@admin_required
@handle_errors("Error while updating the player details.")
def player_update(request, team, player):
    data, files = parse_request(request)
    cleaned = UpdatePlayerForm(data, files).validated()
    team = TeamRepository().get_or_fail(team)

    blob_store = get_blob_store()
    updated = player_assets(blob_store).update(
        player,
        {"first_name": cleaned["first_name"], "last_name": cleaned["last_name"]},
        file=cleaned.get("profile_image"),
        scope=team_scope(team),
    )
    return resource_response(player_resource(updated, blob_store))


@admin_required
@handle_errors("Error while deleting the player.")
def player_destroy(request, team, player):
    team = TeamRepository().get_or_fail(team)
    player_assets().delete(player, scope=team_scope(team))
    return no_content()


player_collection = dispatch(GET=player_index, POST=player_store)
player_detail = dispatch(GET=player_show, PUT=player_update, DELETE=player_destroy)
