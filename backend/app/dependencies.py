"""
Dépendances FastAPI partagées par les routers protégés.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request

from app.config import Settings, get_settings
from app.security import TokenError, decode_access_token

logger = logging.getLogger(__name__)

_AUTH_HEADERS = {"WWW-Authenticate": "Bearer"}


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=401, detail=detail, headers=_AUTH_HEADERS)


def get_current_user_id(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> int:
    """
    Exige un en-tête « Authorization: Bearer <jeton> » valide.
    En cas d'échec, lève 401 avant que le handler ne soit appelé.
    L'identifiant décodé est aussi exposé dans request.state.user_id.
    """
    if not authorization:
        raise _unauthorized("En-tête Authorization manquant.")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise _unauthorized("Format d'en-tête Authorization invalide (attendu : Bearer <jeton>).")

    try:
        user_id = decode_access_token(parts[1], settings)
    except TokenError as e:
        logger.info("Jeton refusé sur %s : %s", request.url.path, e)
        raise _unauthorized(str(e))

    request.state.user_id = user_id
    return user_id
