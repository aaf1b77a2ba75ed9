"""Общие константы и хелперы для тестов API."""
from app.core.security import create_access_token

SECRET = "test-secret"

ROLES = {
    1: "Admin",
    2: "regular",
    3: "editor",
}

# name -> (user id, role id)
USERS = {
    "alice": (1, 2),
    "bob": (2, 3),
    "carol": (3, 2),
    "root": (4, 1),
}


def make_token(user_id, role_id, secret=SECRET, **kwargs):
    return create_access_token({"UserId": user_id, "RoleId": role_id}, secret, **kwargs)


def bearer(token):
    return {"Authorization": f"Bearer {token}"}
