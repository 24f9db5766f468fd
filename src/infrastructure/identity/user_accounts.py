from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from infrastructure.data.connection import ConnectionProvider
from infrastructure.data.models import UserAccountRecord

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
_PBKDF2_ITERATIONS = 240_000


class AccountError(ValueError):
    pass


def _normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def hash_password(password: str, salt: Optional[bytes] = None) -> str:
    salt = salt or secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{salt.hex()}${digest.hex()}"


def check_password(password: str, stored_hash: str) -> bool:
    salt_hex, _, digest_hex = (stored_hash or "").partition("$")
    if not salt_hex or not digest_hex:
        return False
    expected = hash_password(password, bytes.fromhex(salt_hex))
    return hmac.compare_digest(expected, stored_hash)


class UserAccountService:
    """Local identity provider: issues the subject ids that own todos."""

    def __init__(self, connections: ConnectionProvider) -> None:
        self._connections = connections

    def create_account(self, email: str, password: str) -> str:
        email_normalized = _normalize_email(email)
        if not email_normalized:
            logger.warning("create_account.invalid_email")
            raise AccountError("Email is required")
        if len(password or "") < MIN_PASSWORD_LENGTH:
            logger.warning("create_account.weak_password", extra={"email": email_normalized})
            raise AccountError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        with self._connections.session() as session:
            existing = session.exec(
                select(UserAccountRecord).where(UserAccountRecord.email == email_normalized)
            ).first()
            if existing:
                logger.warning("create_account.email_exists", extra={"email": email_normalized})
                raise AccountError("User already exists")
            account = UserAccountRecord(email=email_normalized, password_hash=hash_password(password))
            session.add(account)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise AccountError("User already exists") from exc
            session.refresh(account)
            logger.info("create_account.success", extra={"email": email_normalized})
            return account.id

    def authenticate(self, email: str, password: str) -> Optional[str]:
        email_normalized = _normalize_email(email)
        if not email_normalized or not password:
            return None
        with self._connections.session() as session:
            account = session.exec(
                select(UserAccountRecord).where(UserAccountRecord.email == email_normalized)
            ).first()
        if account is None or not check_password(password, account.password_hash):
            logger.info("auth.login_failed", extra={"email": email_normalized})
            return None
        return account.id

    def exists(self, subject: str | None) -> bool:
        if not subject:
            return False
        with self._connections.session() as session:
            return session.get(UserAccountRecord, subject) is not None
