import logging
from typing import Optional

from fastapi import Depends, Request
from jose import JWTError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.db import get_db
from app.core.errors import Forbidden, InvalidToken, Unauthorized, as_http_exception, service_errors
from app.core.security import decode_token, extract_token_from_header
from app.domains.identity.entities import IdentityContext
from app.domains.identity.schemas import TokenPayload
from app.domains.identity.services import IdentityService

logger = logging.getLogger(__name__)

TOKEN_HEADERS = ("authorization", "x-access-token")


class TokenAuthenticator:
    """Проверка JWT с секретом, переданным при сборке приложения"""

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self._secret = secret
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenAuthenticator":
        return cls(settings.secret_token, settings.jwt_algorithm)

    def extract_token(self, request: Request) -> Optional[str]:
        """Первый из заголовков Authorization / x-access-token"""
        for header in TOKEN_HEADERS:
            token = extract_token_from_header(request.headers.get(header))
            if token:
                return token
        return None

    def authenticate(self, token: Optional[str]) -> IdentityContext:
        if not token:
            raise Unauthorized("Not Authorized")

        try:
            payload = decode_token(token, self._secret, self.algorithm)
            return TokenPayload.model_validate(payload).to_identity()
        except (JWTError, ValidationError) as e:
            logger.info("Rejected token: %s", e)
            raise InvalidToken("Token Invalid")


def get_authenticator(request: Request) -> TokenAuthenticator:
    return request.app.state.authenticator


async def verify_token(
    request: Request,
    authenticator: TokenAuthenticator = Depends(get_authenticator)
) -> IdentityContext:
    """Зависимость: контекст вызывающего пользователя из токена"""
    try:
        identity = authenticator.authenticate(authenticator.extract_token(request))
    except Unauthorized as e:
        raise as_http_exception(e, headers={"WWW-Authenticate": "Bearer"})
    except InvalidToken as e:
        raise as_http_exception(e)

    request.state.identity = identity
    return identity


async def admin_access(
    identity: IdentityContext = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
) -> IdentityContext:
    """Зависимость: доступ только для роли admin"""
    identity_service = IdentityService(db)

    with service_errors("checking admin role"):
        is_admin = await identity_service.is_admin(identity)

    if not is_admin:
        logger.info("User %s is not an admin", identity.user_id)
        raise as_http_exception(Forbidden("Only an admin is authorized for this request"))

    return identity
