from accounts.domain.models import Profile

__all__ = ["Profile"]
