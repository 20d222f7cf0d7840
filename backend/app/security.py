"""
Primitives d'authentification : hachage bcrypt des mots de passe et jetons JWT signés.

Le jeton porte l'identifiant utilisateur (user_id) et la paire iat/exp.
La vérification impose l'algorithme configuré : un jeton signé avec un autre
algorithme (none, HS512, RS256...) est refusé.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from app.config import Settings

logger = logging.getLogger(__name__)


class TokenError(Exception):
    """Jeton absent, mal formé, expiré ou signé avec une clé/un algorithme inattendu."""


def hash_password(password: str, rounds: int = 12) -> str:
    """Retourne le hash bcrypt (sel inclus) du mot de passe."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Comparaison en temps constant (bcrypt.checkpw). Un hash corrompu vaut False."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Hash de mot de passe illisible en base.")
        return False


def create_access_token(user_id: int, settings: Settings, now: Optional[datetime] = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> int:
    """
    Vérifie la signature, l'algorithme et l'expiration du jeton.
    Retourne le user_id embarqué ; lève TokenError sinon.
    """
    try:
        claims = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenError("Jeton expiré.")
    except jwt.InvalidTokenError as e:
        raise TokenError(f"Jeton invalide : {e}")

    user_id = claims.get("user_id")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise TokenError("Jeton invalide : user_id manquant.")
    return user_id
