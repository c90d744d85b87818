import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt
import asyncio

from app.config import get_settings
from app.middleware.auth import (
    ALGORITHM,
    create_access_token,
    decode_token,
    get_caller,
)
from conftest import ALICE


def bearer(token):
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_token_round_trip():
    payload = decode_token(create_access_token(ALICE))
    assert payload["sub"] == ALICE
    assert payload["type"] == "access"


def test_expired_token_rejected():
    token = create_access_token(ALICE, expires_minutes=-1)
    with pytest.raises(HTTPException) as exc:
        decode_token(token)
    assert exc.value.status_code == 401


def test_wrong_token_type_rejected():
    token = jwt.encode({"sub": ALICE, "type": "refresh"}, get_settings().secret_key, algorithm=ALGORITHM)
    with pytest.raises(HTTPException) as exc:
        asyncio.run(get_caller(bearer(token)))
    assert exc.value.status_code == 401


def test_caller_from_token():
    assert asyncio.run(get_caller(bearer(create_access_token(ALICE)))) == ALICE


def test_missing_credentials():
    with pytest.raises(HTTPException):
        asyncio.run(get_caller(None))
