"""Authentication and account endpoints using the service layer."""

from __future__ import annotations

from flask import Blueprint, request

from blog_api.api.deps import (
    get_account_service,
    get_auth_service,
    json_body,
    json_response,
    require_auth,
    timing,
)
from blog_api.schemas import (
    AccountSchema,
    AccountUpdateSchema,
    LoginSchema,
    SignupSchema,
    TokenPairSchema,
)
from blog_api.services.accounts import AccountUpdateIn, SignupIn
from blog_api.services.auth import LoginIn

bp = Blueprint("auth", __name__)

signup_schema = SignupSchema()
login_schema = LoginSchema()
account_schema = AccountSchema()
account_update_schema = AccountUpdateSchema()
token_schema = TokenPairSchema()


# ---- Sessions ----


@bp.post("/signup")
@timing
def signup():
    """Register a new account."""

    payload = signup_schema.load(json_body())
    account = get_account_service().signup(SignupIn(**payload))
    body = {"message": "User created successfully", "user": account_schema.dump(account)}
    return json_response(body, status=201)


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and open a session."""

    data = login_schema.load(json_body())
    pair = get_auth_service().login(LoginIn(username=data["username"], password=data["password"]))
    return json_response(token_schema.dump(pair))


@bp.post("/refresh_token")
@timing
def refresh_token():
    """Rotate the refresh token presented in the ``Authorization`` header."""

    pair = get_auth_service().refresh(request.headers.get("Authorization"))
    return json_response(token_schema.dump(pair))


@bp.post("/logout")
@timing
def logout():
    """End the session owned by the presented refresh token."""

    get_auth_service().logout(request.headers.get("Authorization"))
    return json_response({"message": "Logout successful"})


# ---- Profile ----


@bp.get("/<account_id>")
@timing
def get_account(account_id: str):
    """Return a public profile."""

    account = get_account_service().get(account_id)
    return json_response({"data": account_schema.dump(account)})


@bp.put("/<account_id>")
@require_auth
@timing
def update_account(account_id: str):
    """Update one's own profile."""

    payload = account_update_schema.load(json_body())
    account = get_account_service().update(account_id, AccountUpdateIn(**payload))
    return json_response({"message": "User updated", "data": account_schema.dump(account)})


@bp.delete("/<account_id>")
@require_auth
@timing
def delete_account(account_id: str):
    """Delete one's own account."""

    account = get_account_service().delete(account_id)
    return json_response({"message": "User deleted", "data": account_schema.dump(account)})
