"""
Service métier pour l'inscription et la connexion des utilisateurs.
"""

import logging
from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import Settings
from app.models.user import User
from app.schemas.auth import UserLogin, UserRegister
from app.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


# Hash vérifié quand l'email est inconnu : les deux échecs ont le même coût
@lru_cache
def _dummy_hash(rounds: int) -> str:
    return hash_password("not-a-real-password", rounds=rounds)


def register_user(db: Session, data: UserRegister, settings: Settings) -> User:
    """
    Crée un utilisateur avec un mot de passe haché.
    Lève une ValueError si l'email est déjà utilisé.
    """
    email = data.email.lower()
    user = User(
        email=email,
        password_hash=hash_password(data.password, rounds=settings.BCRYPT_ROUNDS),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Inscription refusée : email déjà utilisé (%s).", email)
        raise ValueError("Un utilisateur avec cet email existe déjà.")
    db.refresh(user)
    logger.info("Utilisateur %s inscrit.", user.id)
    return user


def authenticate(db: Session, data: UserLogin, settings: Settings) -> Optional[str]:
    """
    Vérifie les identifiants et retourne un jeton signé.
    Retourne None sans distinguer email inconnu et mauvais mot de passe.
    """
    user = db.execute(
        select(User).where(User.email == data.email.strip().lower())
    ).scalar_one_or_none()

    if user is None:
        verify_password(data.password, _dummy_hash(settings.BCRYPT_ROUNDS))
        logger.warning("Connexion refusée.")
        return None

    if not verify_password(data.password, user.password_hash):
        logger.warning("Connexion refusée.")
        return None

    return create_access_token(user.id, settings)


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)
