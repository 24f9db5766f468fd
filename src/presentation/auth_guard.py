import logging
from typing import Callable, Optional

from fastapi import Depends, HTTPException
from nicegui import app, ui

from application.contracts.todo_dtos import CallerIdentity
from infrastructure.identity.user_accounts import UserAccountService

logger = logging.getLogger(__name__)

AUTH_USER_KEY = "auth_user"


def current_identity() -> Optional[CallerIdentity]:
    """Resolve the caller once per request from the signed session storage."""
    subject = app.storage.user.get(AUTH_USER_KEY)
    if not subject:
        return None
    return CallerIdentity(subject=str(subject))


def known_identity(
    accounts: Optional[UserAccountService], caller: Optional[CallerIdentity]
) -> Optional[CallerIdentity]:
    """Drop a session subject whose account no longer exists."""
    if caller is None:
        return None
    if accounts is None or accounts.exists(caller.subject):
        return caller
    logger.info("auth.stale_session", extra={"subject": caller.subject})
    return None


def api_identity(accounts: Optional[UserAccountService]) -> Callable[..., CallerIdentity]:
    """FastAPI dependency: the signed-in caller or a 401 before the body is validated."""

    def dependency(caller: Optional[CallerIdentity] = Depends(current_identity)) -> CallerIdentity:
        caller = known_identity(accounts, caller)
        if caller is None:
            raise HTTPException(status_code=401, detail="Unauthorized")
        return caller

    return dependency


def sign_in(subject: str) -> None:
    app.storage.user[AUTH_USER_KEY] = subject


def clear_auth_session() -> None:
    app.storage.user.pop(AUTH_USER_KEY, None)


def is_authenticated(accounts: Optional[UserAccountService], *, redirect: bool = False) -> Optional[CallerIdentity]:
    session_caller = current_identity()
    caller = known_identity(accounts, session_caller)
    if caller:
        return caller
    if session_caller:
        clear_auth_session()
    if redirect:
        ui.navigate.to("/login")
    return None


def require_auth(accounts: Optional[UserAccountService]) -> Optional[CallerIdentity]:
    return is_authenticated(accounts, redirect=True)
