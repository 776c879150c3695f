from django.db import models


class Team(models.Model):
    LOGO_PATH = "logos"

    name = models.CharField(max_length=255)
    logo_path = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name
