"""
AccountService
==============

Aggregate service for the ``Account`` aggregate: signup, profile reads and
owner-only updates and deletion. Sessions are handled by
:class:`blog_api.services.auth.AuthService`.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from blog_api.models.account import Account
from blog_api.services._shared.base import BaseService, ServiceContext
from blog_api.services._shared.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    violates,
)
from blog_api.services._shared.ports import PasswordHasher
from blog_api.services.accounts.dto import AccountOut, AccountUpdateIn, SignupIn

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already exists"
USERNAME_TAKEN = "Username already exists"


def _to_out(account: Account) -> AccountOut:
    return AccountOut(
        id=account.id,
        email=account.email,
        username=account.username,
        first_name=account.first_name,
        last_name=account.last_name,
        created_at=account.created_at,
        updated_at=account.updated_at,
    )


def _conflict_from_integrity(exc: IntegrityError) -> ConflictError | None:
    if violates(exc, "uq_accounts_email") or violates(exc, "accounts.email"):
        return ConflictError("Account", EMAIL_TAKEN)
    if violates(exc, "uq_accounts_username") or violates(exc, "accounts.username"):
        return ConflictError("Account", USERNAME_TAKEN)
    return None


class AccountService(BaseService):
    """
    Application service for accounts.

    Responsibilities
    ----------------
    - Create accounts with unique email and username (email checked first).
    - Hash passwords through the injected :class:`PasswordHasher`.
    - Read public profiles; update or delete only one's own account.
    """

    def __init__(self, *, hasher: PasswordHasher, ctx: ServiceContext | None = None) -> None:
        super().__init__(ctx=ctx)
        self.hasher = hasher

    # --------------------------------------------------------------------- #
    # Signup
    # --------------------------------------------------------------------- #

    def signup(self, dto: SignupIn) -> AccountOut:
        """
        Register a new account with an empty session list.

        :raises ConflictError: ``"Email already exists"`` or
            ``"Username already exists"``, checked in that order.
        """
        try:
            with self.rw_uow() as uow:
                repo = uow.accounts
                if repo.exists_by_email(dto.email):
                    raise ConflictError("Account", EMAIL_TAKEN)
                if repo.exists_by_username(dto.username):
                    raise ConflictError("Account", USERNAME_TAKEN)

                account = repo.add(
                    Account(
                        email=dto.email,
                        username=dto.username,
                        password_hash=self.hasher.hash(dto.password),
                        first_name=dto.first_name,
                        last_name=dto.last_name,
                        refresh_tokens=[],
                    )
                )
                out = _to_out(account)
        except IntegrityError as exc:
            # Lost a race with a concurrent signup
            conflict = _conflict_from_integrity(exc)
            if conflict is None:
                raise
            raise conflict from exc

        logger.info("Account created", extra={"account_id": out.id})
        return out

    # --------------------------------------------------------------------- #
    # Retrieval
    # --------------------------------------------------------------------- #

    def get(self, account_id: str) -> AccountOut:
        """
        :raises ValidationError: Malformed id.
        :raises NotFoundError: No such account.
        """
        self.ensure_valid_id(account_id)
        with self.ro_uow() as uow:
            account = uow.accounts.get(account_id)
            if account is None:
                raise NotFoundError("Account", account_id)
            return _to_out(account)

    # --------------------------------------------------------------------- #
    # Update / delete (owner only)
    # --------------------------------------------------------------------- #

    def update(self, account_id: str, dto: AccountUpdateIn) -> AccountOut:
        """
        Apply a partial profile update for the authenticated owner.

        :raises ForbiddenError: The actor is not ``account_id``.
        :raises ConflictError: New email/username belongs to another account.
        """
        self.ensure_valid_id(account_id)
        self.ensure_owner(account_id)

        changes: dict[str, str] = {
            key: value
            for key, value in (
                ("email", dto.email),
                ("username", dto.username),
                ("first_name", dto.first_name),
                ("last_name", dto.last_name),
            )
            if value is not None
        }
        if dto.password is not None:
            changes["password_hash"] = self.hasher.hash(dto.password)
        if not changes:
            raise ValidationError("No fields to update")

        try:
            with self.rw_uow() as uow:
                repo = uow.accounts
                account = repo.get(account_id)
                if account is None:
                    raise NotFoundError("Account", account_id)
                if "email" in changes and repo.exists_by_email(
                    changes["email"], exclude_id=account_id
                ):
                    raise ConflictError("Account", EMAIL_TAKEN)
                if "username" in changes and repo.exists_by_username(
                    changes["username"], exclude_id=account_id
                ):
                    raise ConflictError("Account", USERNAME_TAKEN)

                repo.update(account, **changes)
                out = _to_out(account)
        except IntegrityError as exc:
            conflict = _conflict_from_integrity(exc)
            if conflict is None:
                raise
            raise conflict from exc

        fields = sorted("password" if k == "password_hash" else k for k in changes)
        logger.info("Account updated", extra={"account_id": account_id, "fields": fields})
        return out

    def delete(self, account_id: str) -> AccountOut:
        """
        Delete the authenticated owner's account, sessions included.

        :returns: The removed account's public view.
        """
        self.ensure_valid_id(account_id)
        self.ensure_owner(account_id)

        with self.rw_uow() as uow:
            account = uow.accounts.get(account_id)
            if account is None:
                raise NotFoundError("Account", account_id)
            out = _to_out(account)
            uow.accounts.delete(account)

        logger.info("Account deleted", extra={"account_id": account_id})
        return out
