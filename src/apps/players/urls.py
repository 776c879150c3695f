from django.urls import path

from . import views

app_name = "players"

urlpatterns = [
    path("teams/<str:team>/players", views.player_collection, name="collection"),
    path("teams/<str:team>/players/<str:player>", views.player_detail, name="detail"),
]
