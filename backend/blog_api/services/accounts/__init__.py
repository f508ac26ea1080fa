from blog_api.services.accounts.dto import AccountOut, AccountUpdateIn, SignupIn
from blog_api.services.accounts.service import AccountService

__all__ = ["AccountOut", "AccountService", "AccountUpdateIn", "SignupIn"]
