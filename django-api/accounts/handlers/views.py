"""HTTP handlers (views) - handle HTTP concerns only."""

from django.contrib.auth import authenticate, login, logout
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidCredentialsError,
    UnauthenticatedError,
)
from accounts.handlers.serializers import (
    LoginSerializer,
    ProfileSerializer,
    ProfileUpdateSerializer,
    SignupSerializer,
)
from accounts.services.account_service import AccountService
from accounts.stores.django_store import DjangoProfileStore

ERROR_STATUS = {
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.EMAIL_TAKEN: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
}


def get_account_service() -> AccountService:
    return AccountService(DjangoProfileStore())


def error_response(error: DomainError) -> Response:
    return Response({"error": error.message}, status=ERROR_STATUS[error.code])


def session_user_id(request: Request) -> str | None:
    return str(request.user.pk) if request.user.is_authenticated else None


class SignupView(APIView):
    """Handler for POST /api/auth/signup"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        data = SignupSerializer(data=request.data)
        data.is_valid(raise_exception=True)
        try:
            profile = get_account_service().sign_up(
                data.validated_data["email"],
                data.validated_data["password"],
                data.validated_data["fullName"],
            )
        except DomainError as exc:
            return error_response(exc)
        user = authenticate(request, username=profile.email, password=data.validated_data["password"])
        if user is not None:
            login(request, user)
        return Response({"profile": ProfileSerializer(profile).data}, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        data = LoginSerializer(data=request.data)
        data.is_valid(raise_exception=True)
        user = authenticate(
            request,
            username=data.validated_data["email"].strip().lower(),
            password=data.validated_data["password"],
        )
        if user is None:
            return error_response(InvalidCredentialsError())
        login(request, user)
        return Response({"success": True})


class LogoutView(APIView):
    """Handler for POST /api/auth/logout"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        logout(request)
        return Response({"success": True})


class ProfileView(APIView):
    """Handler for GET/PUT /api/profile"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        try:
            profile = get_account_service().get_profile(session_user_id(request))
        except DomainError as exc:
            return error_response(exc)
        return Response({"profile": ProfileSerializer(profile).data})

    def put(self, request: Request) -> Response:
        user_id = session_user_id(request)
        if user_id is None:
            return error_response(UnauthenticatedError())
        data = ProfileUpdateSerializer(data=request.data)
        data.is_valid(raise_exception=True)
        profile = get_account_service().update_profile(
            user_id, data.validated_data["fullName"], data.validated_data["phone"]
        )
        return Response({"profile": ProfileSerializer(profile).data})
