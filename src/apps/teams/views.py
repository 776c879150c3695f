from apps.accounts.decorators import admin_required
from apps.common.http import dispatch, handle_errors, no_content, parse_request, resource_response
from apps.common.storage import get_blob_store

from .forms import StoreTeamForm, UpdateTeamForm
from .repositories import TeamRepository
from .resources import team_resource
from .services import TeamCascadeDeleter, team_assets


@handle_errors("Error while getting all the team details.")
def team_index(request):
    blob_store = get_blob_store()
    return resource_response([team_resource(team, blob_store) for team in TeamRepository().list()])


@admin_required
@handle_errors("Error while storing the team details.")
def team_store(request):
    data, files = parse_request(request)
    cleaned = StoreTeamForm(data, files).validated()

    blob_store = get_blob_store()
    team = team_assets(blob_store).create({"name": cleaned["name"]}, file=cleaned["logo"])
    return resource_response(team_resource(team, blob_store), status=201)


@handle_errors("Error while getting the specified team.")
def team_show(request, team):
    return resource_response(team_resource(TeamRepository().get_or_fail(team), get_blob_store()))


@admin_required
@handle_errors("Error while updating the team details.")
def team_update(request, team):
    data, files = parse_request(request)
    cleaned = UpdateTeamForm(data, files).validated()

    blob_store = get_blob_store()
    updated = team_assets(blob_store).update(
        team, {"name": cleaned["name"]}, file=cleaned.get("logo")
    )
    return resource_response(team_resource(updated, blob_store))


@admin_required
@handle_errors("Error while deleting the team.")
def team_destroy(request, team):
    TeamCascadeDeleter().delete(team)
    return no_content()


team_collection = dispatch(GET=team_index, POST=team_store)
team_detail = dispatch(GET=team_show, PUT=team_update, DELETE=team_destroy)
