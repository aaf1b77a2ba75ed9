import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.role_repository import RoleRepository
from app.domains.identity.entities import IdentityContext, Role

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис для проверки ролей при авторизации"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.role_repository = RoleRepository(session)

    async def get_role(self, role_id: int) -> Optional[Role]:
        return await self.role_repository.get_by_id(role_id)

    async def is_admin(self, identity: IdentityContext) -> bool:
        """Роль вызывающего - admin; несуществующая роль считается отказом"""
        role = await self.get_role(identity.role_id)

        if role is None:
            logger.warning(
                "Role %s of user %s not found, denying admin access",
                identity.role_id, identity.user_id
            )
            return False

        return role.is_admin()
