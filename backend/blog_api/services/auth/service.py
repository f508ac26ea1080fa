# blog_api/services/auth/service.py
from __future__ import annotations

import logging

from blog_api.core.config import AuthSettings
from blog_api.services._shared.base import BaseService, ServiceContext
from blog_api.services._shared.errors import (
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthenticatedError,
)
from blog_api.services._shared.ports import PasswordHasher, TokenCodec
from blog_api.services.auth.dto import LoginIn, TokenPairOut

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class AuthService(BaseService):
    """
    Authentication lifecycle service (login / verify / refresh / logout).

    Access tokens are stateless: signature plus expiry. Refresh tokens never
    expire on their own; one is valid only while its exact string sits in the
    owning account's ``refresh_tokens`` list. Presenting a correctly signed
    refresh token that is *not* in the list is treated as theft: every
    session of that account is dropped.

    .. note::
       Token-list updates are read-modify-write. Two concurrent refreshes for
       the same account may lose one update; the loser is then detected as
       reuse on its next refresh.
    """

    def __init__(
        self,
        *,
        codec: TokenCodec,
        hasher: PasswordHasher,
        settings: AuthSettings,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        :param codec: Signs and checks tokens.
        :param hasher: Compares passwords with stored digests.
        :param settings: Secrets and access-token lifetime.
        :param ctx: Optional request-scoped context.
        """
        super().__init__(ctx=ctx)
        self.codec = codec
        self.hasher = hasher
        self.settings = settings

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def extract_token(authorization: str | None) -> str | None:
        """
        Return the credential part of ``"<scheme> <token>"``.

        Any scheme word is accepted. Returns ``None`` when the header is
        absent or has nothing after the scheme.
        """
        if not authorization:
            return None
        parts = authorization.split()
        if len(parts) < 2:
            return None
        return parts[1]

    def _issue_pair(self, account_id: str) -> TokenPairOut:
        access = self.codec.issue(
            {"sub": account_id, "type": ACCESS_TOKEN_TYPE},
            self.settings.access_secret,
            expires_in=self.settings.access_expires,
        )
        refresh = self.codec.issue(
            {"sub": account_id, "type": REFRESH_TOKEN_TYPE},
            self.settings.refresh_secret,
        )
        return TokenPairOut(access_token=access, refresh_token=refresh)

    def _verify_refresh(self, authorization: str | None) -> tuple[str, str]:
        """Return ``(token, account_id)`` for a well-formed refresh token."""
        token = self.extract_token(authorization)
        if token is None:
            raise ForbiddenError("Refresh token required")
        result = self.codec.verify(token, self.settings.refresh_secret)
        if not result.ok or result.claim("type") != REFRESH_TOKEN_TYPE:
            raise ForbiddenError("Invalid refresh token")
        return token, str(result.subject)

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> TokenPairOut:
        """
        Authenticate credentials and open a new session.

        :returns: Access/refresh token pair.
        :raises InvalidCredentialsError: Unknown username or wrong password
            (same message either way).
        """
        with self.rw_uow() as uow:
            account = uow.accounts.get_by_username(dto.username)
            if account is None or not self.hasher.verify(dto.password, account.password_hash):
                raise InvalidCredentialsError()

            pair = self._issue_pair(account.id)
            uow.accounts.append_refresh_token(account, pair.refresh_token)
            account_id = account.id

        logger.info("auth.login", extra={"account_id": account_id})
        return pair

    # ------------------------------------------------------------------ #
    # Access verification
    # ------------------------------------------------------------------ #

    def verify_access(self, authorization: str | None) -> str:
        """
        Resolve the account id carried by an access token.

        :raises UnauthenticatedError: No token was presented (401).
        :raises ForbiddenError: Token is expired, forged, malformed or is not
            an access token (403).
        """
        token = self.extract_token(authorization)
        if token is None:
            raise UnauthenticatedError()
        result = self.codec.verify(token, self.settings.access_secret)
        if not result.ok or result.claim("type") != ACCESS_TOKEN_TYPE:
            raise ForbiddenError("Invalid or expired access token")
        return str(result.subject)

    # ------------------------------------------------------------------ #
    # Refresh with rotation
    # ------------------------------------------------------------------ #

    def refresh(self, authorization: str | None) -> TokenPairOut:
        """
        Rotate a refresh token and emit a new pair.

        The presented token's slot in the list is overwritten with the new
        refresh token, so the list length never changes on rotation.

        :raises ForbiddenError: Missing or invalid token, unknown account, or
            reuse of a token no longer in the list (all sessions revoked).
        """
        token, account_id = self._verify_refresh(authorization)

        dropped: int | None = None
        with self.rw_uow() as uow:
            account = uow.accounts.get(account_id)
            if account is None:
                raise ForbiddenError("Invalid refresh token")

            if token not in (account.refresh_tokens or []):
                # Commit the wipe before reporting; raising here would roll it back.
                dropped = uow.accounts.clear_refresh_tokens(account)
            else:
                pair = self._issue_pair(account.id)
                uow.accounts.replace_refresh_token(account, token, pair.refresh_token)

        if dropped is not None:
            logger.warning(
                "auth.reuse_detected", extra={"account_id": account_id, "sessions": dropped}
            )
            raise ForbiddenError("Refresh token reuse detected")

        logger.info("auth.refresh", extra={"account_id": account_id})
        return pair

    # ------------------------------------------------------------------ #
    # Logout
    # ------------------------------------------------------------------ #

    def logout(self, authorization: str | None) -> None:
        """
        End the session owned by the presented refresh token.

        Exactly one list entry is removed; other sessions survive. A token
        that is not in the list triggers the same revocation as on refresh.

        :raises ForbiddenError: Missing or invalid token, unknown account or
            reuse detected.
        """
        token, account_id = self._verify_refresh(authorization)

        dropped: int | None = None
        with self.rw_uow() as uow:
            account = uow.accounts.get(account_id)
            if account is None:
                raise ForbiddenError("Invalid refresh token")

            if not uow.accounts.remove_refresh_token(account, token):
                dropped = uow.accounts.clear_refresh_tokens(account)

        if dropped is not None:
            logger.warning(
                "auth.reuse_detected", extra={"account_id": account_id, "sessions": dropped}
            )
            raise ForbiddenError("Refresh token reuse detected")

        logger.info("auth.logout", extra={"account_id": account_id})

    # ------------------------------------------------------------------ #
    # Operator revocation
    # ------------------------------------------------------------------ #

    def revoke_all(self, account_id: str) -> int:
        """
        Drop every session of an account.

        :returns: Number of refresh tokens removed.
        :raises NotFoundError: If the account does not exist.
        """
        with self.rw_uow() as uow:
            account = uow.accounts.get(account_id)
            if account is None:
                raise NotFoundError("Account", account_id)
            dropped = uow.accounts.clear_refresh_tokens(account)

        logger.info("auth.revoke_all", extra={"account_id": account_id, "sessions": dropped})
        return dropped
