import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.core.config import Settings
from app.db.models import Base, Role, User
from app.main import create_app

from _helpers import SECRET, ROLES, USERS, make_token, bearer


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite://",
        secret_token=SECRET,
        create_tables=False,
        log_level="DEBUG",
    )


@pytest_asyncio.fixture
async def app(settings):
    application = create_app(settings)

    async with application.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with application.state.session_factory() as session:
        session.add_all([Role(id=role_id, title=title) for role_id, title in ROLES.items()])
        await session.flush()
        session.add_all([
            User(id=user_id, username=name, email=f"{name}@example.com", role_id=role_id)
            for name, (user_id, role_id) in USERS.items()
        ])
        await session.commit()

    yield application

    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    """auth_headers("alice") -> заголовок Authorization с токеном пользователя"""
    def _headers(name):
        user_id, role_id = USERS[name]
        return bearer(make_token(user_id, role_id))
    return _headers


@pytest.fixture
def create_doc(client, auth_headers):
    async def _create(owner, title="Title", content="Content", access="public"):
        resp = await client.post(
            "/documents",
            json={"title": title, "content": content, "access": access},
            headers=auth_headers(owner),
        )
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create
