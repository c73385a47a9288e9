"""Domain models for user accounts."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Profile:
    """Domain representation of a user's profile."""

    user_id: str
    email: str
    full_name: str
    phone: str
    avatar_url: str
    updated_at: datetime | None = None
