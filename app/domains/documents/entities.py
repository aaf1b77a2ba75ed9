import enum
from datetime import datetime
from typing import Optional

from app.domains.identity.entities import IdentityContext


class AccessLevel(str, enum.Enum):
    """Уровни доступа к документу"""
    PUBLIC = "public"
    PRIVATE = "private"
    ROLE = "role"


class Document:
    """Сущность документа домена Documents"""

    def __init__(
        self,
        id: int,
        title: str,
        content: str,
        access: AccessLevel,
        owner_id: int,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.access = AccessLevel(access)
        self.owner_id = owner_id
        self.created_at = created_at
        self.updated_at = updated_at

    def is_owned_by(self, user_id: int) -> bool:
        return self.owner_id == user_id

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title}, access={self.access.value})"


class DocumentAccess:
    """Правила доступа вызывающего пользователя к документу.

    Видимость проверяется по порядку:
    public -> видят все; private -> только владелец;
    role -> только пользователи с той же ролью, что у владельца.
    Изменять и удалять документ может только владелец.
    """

    def __init__(self, document: Document):
        self.document = document

    def is_owner(self, user_id: int) -> bool:
        return self.document.is_owned_by(user_id)

    def requires_owner_role(self) -> bool:
        """Нужна ли роль владельца для решения о видимости"""
        return self.document.access == AccessLevel.ROLE

    def can_view(self, identity: IdentityContext, owner_role_id: Optional[int] = None) -> bool:
        access = self.document.access

        if access == AccessLevel.PUBLIC:
            return True

        if access == AccessLevel.PRIVATE and self.is_owner(identity.user_id):
            return True

        if access == AccessLevel.ROLE:
            return owner_role_id is not None and owner_role_id == identity.role_id

        return False

    def can_edit(self, identity: IdentityContext) -> bool:
        return self.is_owner(identity.user_id)
