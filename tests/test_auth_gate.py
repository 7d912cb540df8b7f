"""Request gate: bad credentials downgrade to anonymous, never fail the request."""
import pytest

from app.core.auth import ANONYMOUS, bearer_token, resolve_auth_context
from app.core.security import TokenService
from conftest import TEST_SECRET, gql

tokens = TokenService(secret_key=TEST_SECRET)


def test_bearer_token_parsing() -> None:
    assert bearer_token(None) is None
    assert bearer_token("") is None
    assert bearer_token("Bearer") is None
    assert bearer_token("Bearer   ") is None
    assert bearer_token("Basic dXNlcjpwdw==") is None
    assert bearer_token("Bearer abc.def") == "abc.def"
    assert bearer_token("bearer abc.def") == "abc.def"


def test_valid_token_authenticates() -> None:
    ctx = resolve_auth_context(f"Bearer {tokens.issue('u-1')}", tokens)
    assert ctx.is_authenticated
    assert ctx.user_id == "u-1"


def test_missing_header_is_anonymous() -> None:
    assert resolve_auth_context(None, tokens) == ANONYMOUS


def test_expired_token_is_anonymous() -> None:
    expired = TokenService(secret_key=TEST_SECRET, expire_minutes=-5).issue("u-1")
    assert resolve_auth_context(f"Bearer {expired}", tokens) == ANONYMOUS


def test_malformed_token_is_anonymous() -> None:
    assert resolve_auth_context("Bearer garbage", tokens) == ANONYMOUS


@pytest.mark.anyio
async def test_expired_token_reaches_resolvers_as_unauthenticated(client):
    expired = TokenService(secret_key=TEST_SECRET, expire_minutes=-5).issue("u-1")
    body = await gql(client, "{ myCourses { id } }", token=expired)
    assert body["data"] == {"myCourses": None}
    assert body["errors"][0]["message"] == "Authentication required"
    assert body["errors"][0]["extensions"]["code"] == "UNAUTHORIZED"


@pytest.mark.anyio
async def test_bad_token_does_not_block_public_queries(client):
    body = await gql(client, "{ courses { id } }", token="garbage")
    assert "errors" not in body
    assert body["data"] == {"courses": []}


@pytest.mark.anyio
async def test_token_for_unknown_user_is_unauthorized(client):
    body = await gql(client, "{ myCourses { id } }", token=tokens.issue("ghost"))
    assert body["data"] == {"myCourses": None}
    assert body["errors"][0]["message"] == "Authentication required"
