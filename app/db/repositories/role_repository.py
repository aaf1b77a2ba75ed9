from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.models.user import Role as RoleModel
from app.domains.identity.entities import Role


class RoleRepository:
    """Репозиторий для чтения ролей"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, role_id: int) -> Optional[Role]:
        result = await self.session.execute(
            select(RoleModel).where(RoleModel.id == role_id)
        )
        db_role = result.scalar_one_or_none()
        return Role(id=db_role.id, title=db_role.title) if db_role else None
