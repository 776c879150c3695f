from django.db import models


class Player(models.Model):
    PROFILE_IMAGE_PATH = "profile-images"

    team = models.ForeignKey("teams.Team", on_delete=models.CASCADE, related_name="players")
    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255)
    profile_image_path = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"
