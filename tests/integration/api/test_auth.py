import pytest
from httpx import AsyncClient
from jose import jwt
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.domain.entities import User
from tests.integration.api.helpers import create_test_user


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "API is running..."}


@pytest.mark.asyncio
async def test_signup_creates_user(client: AsyncClient, db_session: AsyncSession):
    response = await client.post(
        "/api/auth/signup",
        json={"username": "sam", "email": "Sam@Example.com", "password": "Secret123"},
    )

    assert response.status_code == 201
    assert response.json() == {"message": "User created successfully"}

    user = (await db_session.exec(select(User).where(User.username == "sam"))).first()
    assert user is not None
    assert user.email == "sam@example.com"
    assert user.role.value == "stembassador"
    assert user.password_hash != "Secret123"


@pytest.mark.asyncio
async def test_signup_duplicate_username(client: AsyncClient, db_session: AsyncSession, test_data):
    await create_test_user(db_session, test_data.get_copy("user"))

    response = await client.post(
        "/api/auth/signup",
        json={"username": "alex", "email": "other@example.com", "password": "Secret123"},
    )

    assert response.status_code == 409
    assert response.json() == {"message": "Username or email already exists"}


@pytest.mark.asyncio
async def test_signup_rejects_invalid_email(client: AsyncClient):
    response = await client.post(
        "/api/auth/signup",
        json={"username": "sam", "email": "not-an-email", "password": "Secret123"},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize("identifier", ["alex", "user@example.com", " USER@example.com "])
async def test_login_by_username_or_email(
    client: AsyncClient, db_session: AsyncSession, test_data, identifier
):
    user = await create_test_user(db_session, test_data.get_copy("user"))

    response = await client.post("/api/auth/login", json={"username": identifier, "password": "OldPass123"})

    assert response.status_code == 200
    body = response.json()
    assert body["user"] == {
        "id": str(user.id),
        "username": "alex",
        "email": "user@example.com",
        "role": "stembassador",
    }

    claims = jwt.decode(body["token"], ApplicationConfig.JWT_SECRET, algorithms=["HS256"])
    assert claims["user_id"] == str(user.id)
    assert claims["role"] == "stembassador"
    assert claims["exp"] - claims["iat"] == ApplicationConfig.JWT_EXPIRES_HOURS * 3600


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"username": "alex", "password": "WrongPass"},
        {"username": "ghost", "password": "OldPass123"},
        {"username": "ghost@example.com", "password": "OldPass123"},
    ],
)
async def test_login_failure_is_generic(client: AsyncClient, db_session: AsyncSession, test_data, payload):
    await create_test_user(db_session, test_data.get_copy("user"))

    response = await client.post("/api/auth/login", json=payload)

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid username or password"}


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"username": "alex"}, {"password": "OldPass123"}, {}])
async def test_login_missing_fields_is_validation_error(client: AsyncClient, payload):
    response = await client.post("/api/auth/login", json=payload)

    assert response.status_code == 422
