import pytest
from src.core.exceptions import ConflictError, ValidationError
from src.services.account_repository import AccountRepository
from src.services.auth_service import AuthService


@pytest.mark.asyncio
async def test_register_returns_public_user(client, db):
    response = await client.post("/auth/register", json={
        "email": "asha@gmail.com", "password": "pw123", "role": "student"
    })
    assert response.status_code == 201
    body = response.json()
    assert body["user"] == {"email": "asha@gmail.com", "role": "student"}
    assert "password" not in body["user"]

    stored = await db.users.find_one({"email": "asha@gmail.com"})
    assert stored["password"] != "pw123"


@pytest.mark.asyncio
async def test_register_rejects_other_domains(client):
    response = await client.post("/auth/register", json={
        "email": "user@yahoo.com", "password": "pw123", "role": "student"
    })
    assert response.status_code == 400
    assert "gmail.com" in response.json()["error"]


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"password": "pw", "role": "student"},
    {"email": "a@gmail.com", "role": "student"},
    {"email": "a@gmail.com", "password": "pw"},
    {"email": "a@gmail.com", "password": "pw", "role": "teacher"},
])
async def test_register_validation(client, payload):
    response = await client.post("/auth/register", json=payload)
    assert response.status_code == 400
    assert response.json()["error"]


@pytest.mark.asyncio
async def test_duplicate_registration_conflicts(client):
    payload = {"email": "dup@gmail.com", "password": "pw", "role": "admin"}
    first = await client.post("/auth/register", json=payload)
    second = await client.post("/auth/register", json=payload)
    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json() == {"error": "User with this email already exists"}


@pytest.mark.asyncio
async def test_login_success_and_failures(client):
    await client.post("/auth/register", json={
        "email": "admin@gmail.com", "password": "correct", "role": "admin"
    })

    ok = await client.post("/auth/login", json={"email": "admin@gmail.com", "password": "correct"})
    assert ok.status_code == 200
    assert ok.json()["user"] == {"email": "admin@gmail.com", "role": "admin"}

    wrong = await client.post("/auth/login", json={"email": "admin@gmail.com", "password": "nope"})
    unknown = await client.post("/auth/login", json={"email": "ghost@gmail.com", "password": "correct"})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json()

    missing = await client.post("/auth/login", json={"email": "admin@gmail.com"})
    assert missing.status_code == 400
    bad_domain = await client.post("/auth/login", json={"email": "admin@yahoo.com", "password": "x"})
    assert bad_domain.status_code == 400


@pytest.mark.asyncio
async def test_login_accepts_legacy_plain_text_account(client, db):
    await db.users.insert_one({"email": "old@gmail.com", "password": "legacy", "role": "student"})
    response = await client.post("/auth/login", json={"email": "old@gmail.com", "password": "legacy"})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_unique_index_catches_concurrent_duplicate(db):
    accounts = AccountRepository(db)
    await accounts.create({"email": "race@gmail.com", "password": "x", "role": "student"})
    with pytest.raises(ConflictError):
        await accounts.create({"email": "race@gmail.com", "password": "y", "role": "admin"})


@pytest.mark.asyncio
async def test_domain_check_is_case_insensitive(db):
    service = AuthService(AccountRepository(db))
    user = await service.register("Mixed@GMAIL.com", "pw", "student")
    assert user.email == "Mixed@GMAIL.com"
    with pytest.raises(ValidationError):
        await service.register("x@gmail.co", "pw", "student")
