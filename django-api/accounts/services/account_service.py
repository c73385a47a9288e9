"""Account service - signup and profile rules."""

import logging

from accounts.domain import Profile
from accounts.domain.errors import EmailTakenError, InvalidInputError, UnauthenticatedError
from accounts.stores.interfaces import ProfileStore

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AccountService:
    """Service for signup and profile maintenance."""

    def __init__(self, store: ProfileStore) -> None:
        self._store = store

    def sign_up(self, email: str, password: str, full_name: str = "") -> Profile:
        """Create an account.

        Raises:
            InvalidInputError: If the password is too short.
            EmailTakenError: If the email already has an account.
        """
        email = email.strip().lower()
        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidInputError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if self._store.email_exists(email):
            raise EmailTakenError(email)
        profile = self._store.create_account(email, password, full_name.strip())
        logger.info("Created account user=%s", profile.user_id)
        return profile

    def get_profile(self, user_id: str | None) -> Profile:
        if not user_id:
            raise UnauthenticatedError()
        profile = self._store.get_profile(user_id)
        if profile is None:
            raise UnauthenticatedError()
        return profile

    def update_profile(self, user_id: str | None, full_name: str, phone: str) -> Profile:
        if not user_id:
            raise UnauthenticatedError()
        return self._store.upsert_profile(user_id, full_name.strip(), phone.strip())
