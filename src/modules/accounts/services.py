"""Account service layer (Use Cases).

Registration, login and profile maintenance.  Token pairs are issued
with SimpleJWT so the same tokens authenticate every other endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict

import structlog
from django.db import IntegrityError, transaction
from rest_framework_simplejwt.tokens import RefreshToken

from modules.accounts.exceptions import (
    AccountAlreadyExists,
    IncorrectCurrentPassword,
    InvalidCredentials,
    PhoneAlreadyTaken,
    UserNotFound,
)

if TYPE_CHECKING:
    from modules.accounts.dtos import LoginDTO, RegisterDTO, UpdateProfileDTO
    from modules.accounts.models import User
    from modules.accounts.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AuthResult:
    user: User
    tokens: Dict[str, str]


def issue_tokens(user: User) -> Dict[str, str]:
    refresh = RefreshToken.for_user(user)
    return {"access": str(refresh.access_token), "refresh": str(refresh)}


class AccountService:
    def __init__(self, user_repository: IUserRepository) -> None:
        self._user_repo = user_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def register(self, dto: RegisterDTO) -> AuthResult:
        """Create an account and log it in.

        Raises:
            AccountAlreadyExists: email or phone already registered.
        """
        if self._user_repo.get_by_email(dto.email) or self._user_repo.get_by_phone(
            dto.phone
        ):
            logger.warning("user.registration_duplicate")
            raise AccountAlreadyExists()

        try:
            with transaction.atomic():
                user = self._user_repo.create_user(
                    name=dto.name,
                    email=dto.email,
                    phone=dto.phone,
                    password=dto.password,
                )
        except IntegrityError as exc:
            raise AccountAlreadyExists() from exc

        logger.info("user.registered", user_id=str(user.id))
        return AuthResult(user=user, tokens=issue_tokens(user))

    def login(self, dto: LoginDTO) -> AuthResult:
        """Raises ``InvalidCredentials`` for unknown emails and wrong passwords alike."""
        user = self._user_repo.get_by_email(dto.email)
        if user is None or not user.is_active or not user.check_password(dto.password):
            logger.warning("user.login_failed")
            raise InvalidCredentials()

        logger.info("user.logged_in", user_id=str(user.id))
        return AuthResult(user=user, tokens=issue_tokens(user))

    @transaction.atomic
    def update_profile(self, user_id: str, dto: UpdateProfileDTO) -> User:
        """Apply the non-empty fields of *dto*.

        Raises:
            UserNotFound: account no longer exists.
            PhoneAlreadyTaken: phone belongs to another account.
            IncorrectCurrentPassword: password change with a wrong current password.
        """
        user = self.get_profile(user_id)
        log = logger.bind(user_id=str(user.id))

        if dto.name is not None:
            user.name = dto.name

        if dto.phone is not None and dto.phone != user.phone:
            holder = self._user_repo.get_by_phone(dto.phone)
            if holder is not None and holder.pk != user.pk:
                log.warning("user.phone_taken")
                raise PhoneAlreadyTaken()
            user.phone = dto.phone

        if dto.new_password:
            if not user.check_password(dto.current_password or ""):
                log.warning("user.password_change_rejected")
                raise IncorrectCurrentPassword(attr="current_password")
            user.set_password(dto.new_password)
            log.info("user.password_changed")

        self._user_repo.save(user)
        log.info("user.profile_updated")
        return user

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_profile(self, user_id: str) -> User:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFound()
        return user
