from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def _new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- DB MODELS ---
class TodoRecord(SQLModel, table=True):
    __tablename__ = "todos"

    id: str = Field(default_factory=_new_id, primary_key=True)
    title: str
    completed: bool = False
    owner_id: str = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)


class UserAccountRecord(SQLModel, table=True):
    __tablename__ = "user_accounts"

    id: str = Field(default_factory=_new_id, primary_key=True)
    email: str = Field(index=True, unique=True)
    password_hash: str
    created_at: datetime = Field(default_factory=utcnow)
