"""
Tests unitaires des primitives d'authentification (bcrypt + JWT).
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.config import Settings
from app.security import (
    TokenError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


@pytest.fixture
def settings():
    return Settings(SECRET_KEY="test-secret", ALGORITHM="HS256", ACCESS_TOKEN_EXPIRE_MINUTES=5)


# --- Mots de passe ---

def test_hash_password_ne_stocke_pas_le_clair():
    hashed = hash_password("motdepasse123", rounds=4)
    assert hashed != "motdepasse123"
    assert hashed.startswith("$2b$04$")


def test_hash_password_sel_aleatoire():
    assert hash_password("motdepasse123", rounds=4) != hash_password("motdepasse123", rounds=4)


def test_verify_password_correct():
    hashed = hash_password("motdepasse123", rounds=4)
    assert verify_password("motdepasse123", hashed) is True


def test_verify_password_incorrect():
    hashed = hash_password("motdepasse123", rounds=4)
    assert verify_password("mauvais", hashed) is False


def test_verify_password_hash_corrompu():
    assert verify_password("motdepasse123", "pas-un-hash-bcrypt") is False


# --- Jetons ---

def test_token_aller_retour(settings):
    token = create_access_token(7, settings)
    assert decode_access_token(token, settings) == 7


def test_token_contient_iat_et_exp(settings):
    token = create_access_token(7, settings)
    claims = jwt.decode(token, "test-secret", algorithms=["HS256"])
    assert claims["user_id"] == 7
    assert claims["exp"] - claims["iat"] == 5 * 60


def test_token_expire(settings):
    issued = datetime.now(timezone.utc) - timedelta(hours=1)
    token = create_access_token(7, settings, now=issued)
    with pytest.raises(TokenError, match="expiré"):
        decode_access_token(token, settings)


def test_token_mauvaise_cle(settings):
    token = create_access_token(7, settings)
    other = Settings(SECRET_KEY="autre-secret", ALGORITHM="HS256")
    with pytest.raises(TokenError):
        decode_access_token(token, other)


def test_token_algorithme_inattendu_refuse(settings):
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"user_id": 7, "iat": now, "exp": now + timedelta(minutes=5)},
        "test-secret",
        algorithm="HS512",
    )
    with pytest.raises(TokenError):
        decode_access_token(token, settings)


def test_token_algorithme_none_refuse(settings):
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"user_id": 7, "iat": now, "exp": now + timedelta(minutes=5)},
        None,
        algorithm="none",
    )
    with pytest.raises(TokenError):
        decode_access_token(token, settings)


def test_token_sans_exp_refuse(settings):
    token = jwt.encode({"user_id": 7, "iat": datetime.now(timezone.utc)}, "test-secret", algorithm="HS256")
    with pytest.raises(TokenError):
        decode_access_token(token, settings)


def test_token_sans_user_id_refuse(settings):
    now = datetime.now(timezone.utc)
    token = jwt.encode({"iat": now, "exp": now + timedelta(minutes=5)}, "test-secret", algorithm="HS256")
    with pytest.raises(TokenError, match="user_id"):
        decode_access_token(token, settings)


def test_token_signature_alteree(settings):
    token = create_access_token(7, settings)
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])
    with pytest.raises(TokenError):
        decode_access_token(tampered, settings)


def test_token_mal_forme(settings):
    with pytest.raises(TokenError):
        decode_access_token("pas.un.jeton", settings)
