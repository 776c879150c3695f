import hashlib
import secrets

from django.conf import settings
from django.db import models
from django.utils import timezone


def hash_token(plain: str) -> str:
    return hashlib.sha256(plain.encode("utf-8")).hexdigest()


class AccessTokenQuerySet(models.QuerySet):
    def issue(self, user, name: str = "") -> tuple["AccessToken", str]:
        """Create a token for `user`. The plain value is returned once and never stored."""
        plain = secrets.token_urlsafe(40)
        token = self.create(user=user, name=name, token_hash=hash_token(plain))
        return token, f"{token.pk}|{plain}"

    def resolve(self, bearer: str):
        token_id, sep, plain = bearer.partition("|")
        if not sep or not token_id.isdigit() or not plain:
            return None
        token = self.select_related("user").filter(pk=int(token_id)).first()
        if token is None or not secrets.compare_digest(token.token_hash, hash_token(plain)):
            return None
        if not token.user.is_active:
            return None
        return token


class AccessToken(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="access_tokens"
    )
    name = models.CharField(max_length=255, blank=True, default="")
    token_hash = models.CharField(max_length=64, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    last_used_at = models.DateTimeField(null=True, blank=True)

    objects = AccessTokenQuerySet.as_manager()

    def touch(self) -> None:
        self.last_used_at = timezone.now()
        self.save(update_fields=["last_used_at"])

    def __str__(self) -> str:
        return f"{self.user} ({self.name or 'token'})"
