from pydantic import BaseModel, Field, ConfigDict

from app.db.base import MAX_DB_INT
from app.domains.identity.entities import IdentityContext


class TokenPayload(BaseModel):
    """Схема для данных из JWT токена"""
    user_id: int = Field(..., alias="UserId", ge=1, le=MAX_DB_INT)
    role_id: int = Field(..., alias="RoleId", ge=1, le=MAX_DB_INT)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_identity(self) -> IdentityContext:
        return IdentityContext(user_id=self.user_id, role_id=self.role_id)
