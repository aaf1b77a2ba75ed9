from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import jwt


def create_access_token(
    data: Dict[str, Any],
    secret: str,
    algorithm: str = "HS256",
    expires_delta: Optional[timedelta] = None
) -> str:
    """Создание JWT токена доступа"""
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(days=1)  # По умолчанию сутки

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """Проверка подписи и срока действия; при ошибке бросает JWTError"""
    return jwt.decode(token, secret, algorithms=[algorithm])


def extract_token_from_header(value: Optional[str]) -> Optional[str]:
    """Извлечение токена из заголовка (со схемой Bearer или без неё)"""
    if not value or not value.strip():
        return None

    parts = value.split()

    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]

    # Остальное считаем "сырым" токеном, его проверит decode_token
    return value.strip()
