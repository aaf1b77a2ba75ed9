from app.domains.identity.entities import IdentityContext, User, Role
from app.domains.identity.schemas import TokenPayload

__all__ = [
    "IdentityContext", "User", "Role",
    "TokenPayload",
]
