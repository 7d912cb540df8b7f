"""Registration and login."""
import pytest

from app.core.errors import DuplicateEmail, InvalidCredentials, InvalidInput, Unauthorized
from app.core.security import verify_password
from app.db.identity import UserStore
from app.services.accounts import AccountService
from conftest import as_user

pytestmark = pytest.mark.anyio


@pytest.fixture
def accounts(app, db) -> AccountService:
    return AccountService(db, app.state.tokens)


async def test_register_normalizes_email_and_hashes_password(accounts, db):
    user = await accounts.register("Ann", "  Ann@X.com ", "pw1")
    assert user.email == "ann@x.com"
    assert user.enrolled_courses == []
    assert user.progress == []

    stored = await UserStore(db).find_by_email("ann@x.com")
    assert stored is not None
    assert stored.hashed_password != "pw1"
    assert verify_password("pw1", stored.hashed_password)


async def test_register_duplicate_email_leaves_original_untouched(accounts, db):
    original = await accounts.register("Ann", "ann@x.com", "pw1")

    with pytest.raises(DuplicateEmail):
        await accounts.register("Impostor", "ANN@x.com", "other")

    stored = await UserStore(db).find_by_email("ann@x.com")
    assert stored.id == original.id
    assert stored.name == "Ann"
    assert verify_password("pw1", stored.hashed_password)


@pytest.mark.parametrize(
    "name,email,password",
    [
        ("", "ann@x.com", "pw1"),
        ("Ann", "not-an-email", "pw1"),
        ("Ann", "ann@x.com", ""),
        ("Ann", "ann@x.com", "x" * 73),
    ],
)
async def test_register_rejects_invalid_input(accounts, name, email, password):
    with pytest.raises(InvalidInput):
        await accounts.register(name, email, password)


async def test_login_returns_token_for_same_user(app, accounts):
    user = await accounts.register("Ann", "ann@x.com", "pw1")
    auth = await accounts.login("ann@x.com", "pw1")
    assert auth.user_id == user.id
    assert app.state.tokens.verify(auth.token) == user.id


async def test_login_wrong_password(accounts):
    await accounts.register("Ann", "ann@x.com", "pw1")
    with pytest.raises(InvalidCredentials):
        await accounts.login("ann@x.com", "wrong")


async def test_login_unknown_email(accounts):
    with pytest.raises(InvalidCredentials) as exc:
        await accounts.login("nobody@x.com", "pw1")
    assert str(exc.value) == "Invalid email or password"


async def test_me(accounts):
    user = await accounts.register("Ann", "ann@x.com", "pw1")
    me = await accounts.me(as_user(user.id))
    assert me.id == user.id
    with pytest.raises(Unauthorized):
        await accounts.me(as_user(None))
