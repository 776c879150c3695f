from django.urls import path

from . import views

app_name = "teams"

urlpatterns = [
    path("teams", views.team_collection, name="collection"),
    path("teams/<str:team>", views.team_detail, name="detail"),
]
