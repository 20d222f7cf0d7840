"""
Router d'authentification.
POST /auth/register — inscription (email + mot de passe)
POST /auth/login    — connexion, retourne un jeton JWT
GET  /users/me      — profil de l'utilisateur connecté
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.database import get_db
from app.dependencies import get_current_user_id
from app.schemas.auth import RegisterResponse, TokenResponse, UserLogin, UserRegister, UserResponse
from app.services import auth_service

router = APIRouter(tags=["Authentification"])


@router.post("/auth/register", response_model=RegisterResponse, status_code=201, summary="Inscription")
def register(data: UserRegister, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    """Le mot de passe est haché avec bcrypt ; seul le hash est stocké."""
    try:
        user = auth_service.register_user(db, data, settings)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return RegisterResponse(id=user.id)


@router.post("/auth/login", response_model=TokenResponse, summary="Connexion")
def login(data: UserLogin, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    """Même réponse 401 pour un email inconnu et pour un mauvais mot de passe."""
    token = auth_service.authenticate(db, data, settings)
    if token is None:
        raise HTTPException(
            status_code=401,
            detail="Email ou mot de passe incorrect.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(token=token)


@router.get("/users/me", response_model=UserResponse, summary="Profil de l'utilisateur connecté")
def me(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    user = auth_service.get_user(db, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="Utilisateur introuvable.")
    return user
