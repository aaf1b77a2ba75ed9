from dataclasses import dataclass
from datetime import datetime
from typing import Optional


ADMIN_ROLE_TITLE = "admin"


@dataclass(frozen=True)
class IdentityContext:
    """Данные вызывающего пользователя из JWT; живут один запрос"""
    user_id: int
    role_id: int


class Role:
    """Сущность роли"""

    def __init__(self, id: int, title: str):
        self.id = id
        self.title = title

    def is_admin(self) -> bool:
        return self.title.lower() == ADMIN_ROLE_TITLE

    def __repr__(self) -> str:
        return f"Role(id={self.id}, title={self.title})"


class User:
    """Сущность пользователя домена Identity"""

    def __init__(
        self,
        id: int,
        username: str,
        email: str,
        role_id: int,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.username = username
        self.email = email
        self.role_id = role_id
        self.created_at = created_at
        self.updated_at = updated_at

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username}, role_id={self.role_id})"
