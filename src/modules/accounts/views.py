"""Account API views: register, login and profile."""

from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.accounts.dtos import LoginDTO, RegisterDTO, UpdateProfileDTO
from modules.accounts.repositories.django_repository import UserDjangoRepository
from modules.accounts.serializers import (
    AuthResultSerializer,
    LoginSerializer,
    RegisterSerializer,
    UpdateProfileSerializer,
    UserSerializer,
)
from modules.accounts.services import AccountService


class AccountServiceMixin:
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = AccountService(user_repository=UserDjangoRepository())


class RegisterView(AccountServiceMixin, APIView):
    """POST /api/v1/auth/register/"""

    permission_classes = [AllowAny]
    authentication_classes: list = []
    throttle_scope = "auth"

    def post(self, request: Request) -> Response:
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self._service.register(RegisterDTO(**serializer.validated_data))
        return Response(AuthResultSerializer(result).data, status=status.HTTP_201_CREATED)


class LoginView(AccountServiceMixin, APIView):
    """POST /api/v1/auth/login/"""

    permission_classes = [AllowAny]
    authentication_classes: list = []
    throttle_scope = "auth"

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self._service.login(LoginDTO(**serializer.validated_data))
        return Response(AuthResultSerializer(result).data)


class ProfileView(AccountServiceMixin, APIView):
    """GET/PUT/PATCH /api/v1/auth/profile/"""

    def get(self, request: Request) -> Response:
        user = self._service.get_profile(str(request.user.pk))
        return Response(UserSerializer(user).data)

    def put(self, request: Request) -> Response:
        serializer = UpdateProfileSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = self._service.update_profile(
            str(request.user.pk), UpdateProfileDTO(**serializer.validated_data)
        )
        return Response(UserSerializer(user).data)

    patch = put
