"""Django ORM implementation of the ProfileStore."""

from django.contrib.auth import get_user_model
from django.db import transaction

from accounts import models
from accounts.domain import Profile
from accounts.stores.interfaces import ProfileStore


def to_domain(user, profile: models.Profile | None) -> Profile:
    return Profile(
        user_id=str(user.pk),
        email=user.email,
        full_name=profile.full_name if profile else "",
        phone=profile.phone if profile else "",
        avatar_url=profile.avatar_url if profile else "",
        updated_at=profile.updated_at if profile else None,
    )


class DjangoProfileStore(ProfileStore):
    """Profiles backed by django.contrib.auth users."""

    def email_exists(self, email: str) -> bool:
        return get_user_model().objects.filter(email__iexact=email).exists()

    def create_account(self, email: str, password: str, full_name: str) -> Profile:
        with transaction.atomic():
            user = get_user_model().objects.create_user(username=email, email=email, password=password)
            profile = models.Profile.objects.create(user=user, full_name=full_name)
        return to_domain(user, profile)

    def get_profile(self, user_id: str) -> Profile | None:
        user = get_user_model().objects.filter(pk=user_id).first()
        if user is None:
            return None
        return to_domain(user, models.Profile.objects.filter(user=user).first())

    def upsert_profile(self, user_id: str, full_name: str, phone: str) -> Profile:
        user = get_user_model().objects.get(pk=user_id)
        profile, _ = models.Profile.objects.update_or_create(
            user=user, defaults={"full_name": full_name, "phone": phone}
        )
        return to_domain(user, profile)
