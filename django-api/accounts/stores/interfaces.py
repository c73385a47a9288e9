"""Store interfaces (repository pattern)."""

from abc import ABC, abstractmethod

from accounts.domain import Profile


class ProfileStore(ABC):
    """Interface for account and profile persistence."""

    @abstractmethod
    def email_exists(self, email: str) -> bool:
        ...

    @abstractmethod
    def create_account(self, email: str, password: str, full_name: str) -> Profile:
        """Create the auth user and its profile together."""
        ...

    @abstractmethod
    def get_profile(self, user_id: str) -> Profile | None:
        """Return the user's profile, or None if the user does not exist."""
        ...

    @abstractmethod
    def upsert_profile(self, user_id: str, full_name: str, phone: str) -> Profile:
        """Create or update the user's profile."""
        ...
