"""Account repository: lookups and refresh-token list maintenance."""

from __future__ import annotations

from blog_api.models.account import Account, normalize_email
from blog_api.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    """Persistence-only repository for :class:`Account`.

    The token helpers mutate ``Account.refresh_tokens`` in place and flush;
    deciding *when* to mutate (rotation, reuse detection) belongs to the auth
    service.
    """

    model = Account

    # ---------------------------- Whitelists ----------------------------

    def _sortable_fields(self):
        return {
            "username": Account.username,
            "email": Account.email,
            "created_at": Account.created_at,
        }

    def _filterable_fields(self):
        return {
            "email": Account.email,
            "username": Account.username,
        }

    def _updatable_fields(self):
        """Profile fields; the digest is set by the service after hashing."""
        return {"email", "username", "first_name", "last_name", "password_hash"}

    # ---------------------------- Lookup helpers ----------------------------

    def get_by_username(self, username: str) -> Account | None:
        return self.find_one(username=username.strip())

    def exists_by_email(self, email: str, *, exclude_id: str | None = None) -> bool:
        """Return ``True`` when another account already holds ``email``.

        Comparison is case-insensitive: the address is normalized the same
        way the model stores it.

        :param exclude_id: Account to ignore, used when an owner re-submits
            their own email on update.
        """
        return self.exists(email=normalize_email(email), exclude_id=exclude_id)

    def exists_by_username(self, username: str, *, exclude_id: str | None = None) -> bool:
        return self.exists(username=username.strip(), exclude_id=exclude_id)

    # ---------------------------- Refresh tokens ----------------------------

    def append_refresh_token(self, account: Account, token: str) -> None:
        """Add a new session at the end of the list."""
        if account.refresh_tokens is None:
            account.refresh_tokens = []
        account.refresh_tokens.append(token)
        self.flush()

    def replace_refresh_token(self, account: Account, old: str, new: str) -> bool:
        """Swap ``old`` for ``new`` at the same position.

        :returns: ``False`` when ``old`` is not in the list (nothing changed).
        """
        tokens = account.refresh_tokens or []
        try:
            index = tokens.index(old)
        except ValueError:
            return False
        account.refresh_tokens[index] = new
        self.flush()
        return True

    def remove_refresh_token(self, account: Account, token: str) -> bool:
        """Drop the first occurrence of ``token``; ``False`` if absent."""
        tokens = account.refresh_tokens or []
        if token not in tokens:
            return False
        account.refresh_tokens.remove(token)
        self.flush()
        return True

    def clear_refresh_tokens(self, account: Account) -> int:
        """Drop every session for ``account``.

        :returns: How many tokens were removed.
        """
        dropped = len(account.refresh_tokens or [])
        account.refresh_tokens = []
        self.flush()
        return dropped
