from accounts.handlers.views import LoginView, LogoutView, ProfileView, SignupView

__all__ = ["LoginView", "LogoutView", "ProfileView", "SignupView"]
